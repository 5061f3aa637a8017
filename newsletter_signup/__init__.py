"""newsletter_signup - 구독 갱신일 계산 서비스"""

__version__ = "1.0.0"
