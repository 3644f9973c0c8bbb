"""
Application Services.

역할:
- conversion: 변환 서비스 호출 + 결과/에러 문자열 결정
- binding: 입력/출력 필드 주입 인터페이스
"""

from .binding import TextFieldBinding, UIBinding
from .conversion import ConversionClient

__all__ = [
    "ConversionClient",
    "UIBinding",
    "TextFieldBinding",
]
