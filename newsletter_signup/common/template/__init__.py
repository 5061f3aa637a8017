"""템플릿 렌더링 패키지"""

from .renderer import TemplateRenderer, get_renderer

__all__ = ["TemplateRenderer", "get_renderer"]
