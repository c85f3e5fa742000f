"""웹 패키지"""
