"""공통 모듈"""
