"""
UI Binding 추상 인터페이스.

입력/출력 필드를 전역 참조 대신 주입받는다.
렌더링 표면 없이 ConversionClient를 테스트할 수 있도록 하기 위함.
"""

from abc import ABC, abstractmethod


class UIBinding(ABC):
    """
    입력 필드 + 출력 필드 바인딩.

    역할: 현재 입력값 제공, 출력값 반영 (변환 로직 없음)
    """

    @abstractmethod
    def read_input(self) -> str:
        """입력 필드의 현재 값 (빈 문자열 가능)."""
        ...

    @abstractmethod
    def write_output(self, text: str) -> None:
        """출력 필드에 값 쓰기 (마지막 쓰기가 남는다)."""
        ...


class TextFieldBinding(UIBinding):
    """
    메모리 기반 텍스트 필드 바인딩.

    Usage:
        binding = TextFieldBinding(input_text="annyeonghaseyo")
        await client.convert_field(binding)
        binding.output_text  # "안녕하세요"
    """

    def __init__(self, input_text: str = "", output_text: str = "") -> None:
        self.input_text = input_text
        self.output_text = output_text
        self.write_count = 0

    def read_input(self) -> str:
        return self.input_text

    def write_output(self, text: str) -> None:
        self.output_text = text
        self.write_count += 1
