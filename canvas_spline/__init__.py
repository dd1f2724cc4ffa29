"""Canvas Spline: 베지어 스플라인 곡선 엔진."""
