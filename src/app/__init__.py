"""
App layer: UI 서버 (FastAPI + HTMX) + 변환 클라이언트.

역할:
- 입력 필드 → 변환 서비스 POST /convert → 출력 필드
- ⚠️ 한자 변환 로직 없음 (외부 변환 서비스에 위임)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML
- src/app/services/ → 변환 클라이언트, UI 바인딩
"""
