"""도메인 순수 계산 서비스 (곡선 평가, 투영, 좌표 변환)."""
