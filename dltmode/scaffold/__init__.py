"""Scaffold rendering for planned pipelines.

Provides:
- Renderer registry: registration and retrieval of renderers by language
- Built-in renderers: sql, python
- render_plan: render every step of a PipelinePlan
"""

# Registry must be imported first (renderer modules use register_renderer decorator)
from dltmode.scaffold.registry import (
    Renderer,
    RendererFactory,
    clear_registry,
    get_renderer,
    list_languages,
    register_renderer,
)

from dltmode.scaffold.python import PythonRenderer
from dltmode.scaffold.render import RenderedStep, render_plan, render_step
from dltmode.scaffold.sql import SqlRenderer

__all__ = [
    "Renderer",
    "RendererFactory",
    "register_renderer",
    "get_renderer",
    "list_languages",
    "clear_registry",
    "SqlRenderer",
    "PythonRenderer",
    "RenderedStep",
    "render_plan",
    "render_step",
]
