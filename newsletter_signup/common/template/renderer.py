"""
Jinja2 템플릿 렌더링 모듈
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ...config import settings
from ..subscription.models import Subscription

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """알림 이메일 템플릿 렌더러"""

    def __init__(self, template_dir: str = None):
        if template_dir is None:
            template_dir = settings.template_dir

        self.template_dir = Path(template_dir)

        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._env.filters["format_date"] = self._format_date
        self._env.filters["or_dash"] = self._or_dash

    @staticmethod
    def _format_date(dt: datetime, fmt: str = "%Y-%m-%d %H:%M:%S %Z") -> str:
        if dt is None:
            return ""
        if isinstance(dt, str):
            return dt
        return dt.strftime(fmt).strip()

    @staticmethod
    def _or_dash(value) -> str:
        if value is None or value == "":
            return "-"
        return str(value)

    def render(self, template_name: str, context: dict) -> str:
        """범용 템플릿 렌더링"""
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            logger.error(f"템플릿 렌더링 실패 ({template_name}): {e}")
            raise

    def render_new_subscription_notification(
        self,
        subscription: Subscription,
        today: Optional[date] = None,
    ) -> Tuple[str, str, str]:
        """신규 구독 알림 렌더링

        Returns:
            (subject, html_content, text_content)
        """
        context = {
            "subscription": subscription,
            "subscription_type": subscription.subscription_type.as_str(),
            "renewal_date": subscription.renewal_date(today),
        }
        html_content = self.render("new_subscription.html", context)
        text_content = self.render("new_subscription.txt", context)
        return settings.notification_subject, html_content, text_content


_renderer = None


def get_renderer() -> TemplateRenderer:
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer
