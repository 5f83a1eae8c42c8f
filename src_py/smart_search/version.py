"""패키지 버전 정보."""

__version__ = "0.1.0"
