"""Kida environment setup for page rendering.

Page files are kida templates named by their path relative to the pages
directory, so ``_layout.html`` partials and ``{% extends %}`` work the
same way they do when the pages are served live.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader

from perch.config import ExportConfig
from perch.export.types import PageEntry


def create_environment(config: ExportConfig) -> Environment:
    """Create a kida Environment from export configuration.

    Called once per export run.  The pages directory comes first, then
    ``config.component_dirs`` for shared partials.
    """
    loaders = [FileSystemLoader(str(config.pages_dir))]
    loaders.extend(FileSystemLoader(str(d)) for d in config.component_dirs)

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def render_page(env: Environment, page: PageEntry) -> str:
    """Render a discovered page to HTML.

    The template sees its own ``page`` path, the ``entry`` it is written
    to, and the ``param_names`` whose values arrive in the query string.
    """
    template = env.get_template(page.source)
    return template.render(
        {
            "page": page.source,
            "entry": page.destination,
            "param_names": page.param_names,
        }
    )
