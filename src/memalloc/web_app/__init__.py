"""웹 애플리케이션 패키지"""
