"""Canvas Spline 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class InvalidConfigurationError(DomainError):
    """잘못된 설정값 (LUT 해상도, 노트 데이터 등) 사용 시."""
