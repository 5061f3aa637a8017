"""
newsletter_signup 설정 관리 모듈
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 프로젝트 경로
    BASE_DIR: Path = Path(__file__).parent.parent

    # 로깅
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)

    # 알림 이메일 템플릿
    template_dir: Path = Field(default=Path(__file__).parent / "templates")
    notification_subject: str = Field(default="New Subscription")
    subscription_notification_addresses: List[str] = Field(default_factory=list)

    # CSV 입출력
    csv_encoding: str = Field(default="utf-8")

    class Config:
        env_file = Path(__file__).parent.parent / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 반환"""
    return Settings()


settings = get_settings()
