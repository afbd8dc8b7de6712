"""Dockerfile rendering into a scoped temporary file."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import jinja2

from ..models.config import BuildConfig
from ..services.exceptions import RecipeIOError, TemplateError
from .constants import DOCKERFILE_PREFIX
from .dockerfile_template import MUSL_DOCKERFILE

logger = logging.getLogger(__name__)

_jinja_env = jinja2.Environment(undefined=jinja2.StrictUndefined, keep_trailing_newline=True)


class RenderedRecipe:
    """Owning handle for a rendered Dockerfile on disk.

    The file is deleted by :meth:`release`, which is safe to call more than
    once. Used as a context manager the file is released on exit.
    """

    def __init__(self, path: Path):
        self.path = path
        self.released = False

    def release(self) -> None:
        """Delete the rendered Dockerfile."""
        if self.released:
            return
        self.released = True
        try:
            self.path.unlink(missing_ok=True)
            logger.debug(f"Removed rendered Dockerfile {self.path}")
        except OSError as e:
            raise RecipeIOError(f"Failed to remove {self.path}: {e}") from e

    def __enter__(self) -> "RenderedRecipe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"RenderedRecipe({str(self.path)!r})"


def render_dockerfile(path: str, bin: str, template: str = MUSL_DOCKERFILE) -> str:
    """Render the Dockerfile template with the project path and binary name."""
    try:
        return _jinja_env.from_string(template).render(path=path, bin=bin)
    except jinja2.TemplateError as e:
        raise TemplateError(f"Failed to render Dockerfile template: {e}") from e


def render_recipe(
    config: BuildConfig,
    directory: Union[str, Path] = ".",
    template: Optional[str] = None,
) -> RenderedRecipe:
    """Render the Dockerfile for ``config`` into a temporary file.

    The file is created inside ``directory`` (the build context by default)
    rather than the system temp dir so docker can always read it.

    Raises:
        TemplateError: If the template cannot be rendered
        RecipeIOError: If the temporary file cannot be created or written
    """
    content = render_dockerfile(
        config.project_path,
        config.binary_name,
        template if template is not None else MUSL_DOCKERFILE,
    )

    try:
        fd, name = tempfile.mkstemp(prefix=DOCKERFILE_PREFIX, dir=directory)
    except OSError as e:
        raise RecipeIOError(f"Failed to create temporary Dockerfile in {directory}: {e}") from e

    recipe = RenderedRecipe(Path(name))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
    except OSError as e:
        recipe.release()
        raise RecipeIOError(f"Failed to write temporary Dockerfile {name}: {e}") from e

    logger.debug(f"Rendered Dockerfile to {recipe.path}")
    return recipe
