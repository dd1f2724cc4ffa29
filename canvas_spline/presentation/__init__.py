"""프레젠테이션 레이어 (CLI 진입점)."""
