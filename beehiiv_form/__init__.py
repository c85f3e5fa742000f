"""beehiiv 이메일 구독 폼"""

__version__ = "1.0.0"
