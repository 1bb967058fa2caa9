"""mizui: file-based string templates with components and dotted-path placeholders."""

from mizui.domain.models import MizuiConfig, RenderResult
from mizui.runtime import render
from mizui.services.renderer import Renderer

__all__ = [
    "MizuiConfig",
    "RenderResult",
    "Renderer",
    "render",
]
