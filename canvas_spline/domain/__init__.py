"""도메인 레이어 (값 객체, 엔티티, 이벤트, 순수 계산 서비스)."""
