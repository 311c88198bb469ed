"""Renderer registry for scaffold languages."""

from typing import Callable, Protocol, overload, runtime_checkable

from dltmode.core.exceptions import RenderError


@runtime_checkable
class Renderer(Protocol):
    """Protocol for scaffold renderers."""

    extension: str

    def render(self, step_plan) -> str:
        """Render the source for one planned step."""
        ...


RendererFactory = Callable[[], Renderer]

_renderer_registry: dict[str, RendererFactory] = {}


@overload
def register_renderer(
    language: str,
) -> Callable[[RendererFactory], RendererFactory]: ...


@overload
def register_renderer(language: str, factory: RendererFactory) -> None: ...


def register_renderer(
    language: str,
    factory: RendererFactory | None = None,
) -> Callable[[RendererFactory], RendererFactory] | None:
    """Register a renderer factory.

    Can be used as a decorator or called directly:

        # As decorator
        @register_renderer("sql")
        class SqlRenderer: ...

        # Direct call
        register_renderer("sql", SqlRenderer)

    Args:
        language: Unique language identifier (e.g., 'sql').
        factory: Factory callable (optional if used as decorator).

    Raises:
        RenderError: If a renderer for the language is already registered.
    """

    def _register(f: RendererFactory) -> RendererFactory:
        if language in _renderer_registry:
            raise RenderError(
                f"Renderer '{language}' is already registered",
                context={"language": language},
            )
        _renderer_registry[language] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_renderer(language: str) -> Renderer:
    """Create a renderer for a language.

    Raises:
        RenderError: If no renderer is registered for the language.
    """
    factory = _renderer_registry.get(language)
    if factory is None:
        available = ", ".join(sorted(_renderer_registry.keys())) or "(none)"
        raise RenderError(
            f"Unknown scaffold language: '{language}'",
            context={"language": language, "available_languages": available},
        )
    return factory()


def list_languages() -> list[str]:
    """Return a sorted list of registered languages."""
    return sorted(_renderer_registry.keys())


def clear_registry() -> None:
    """Clear all registered renderers.

    Intended for testing only.
    """
    _renderer_registry.clear()
