from typing import Mapping, Optional, Union

import logbook
from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateNotFound

logger = logbook.Logger(__name__)

TemplateSet = Union[Environment, Mapping[str, Template]]

GENERIC_TEMPLATE_NAME = "error"

# Placeholder used when there is no template set, or nothing in it matches
DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
	<meta charset="utf-8">
	<title>{{ error }}</title>
</head>
<body>
	<h1>{{ status }} {{ status.text }}</h1>
	<p>{{ message }}</p>
</body>
</html>
"""

default_template = Environment(autoescape=True, undefined=StrictUndefined).from_string(DEFAULT_TEMPLATE)


def _lookup(templates: TemplateSet, name: str) -> Optional[Template]:
    if not isinstance(templates, Environment):
        return templates.get(name)

    try:
        return templates.get_template(name)
    except TemplateNotFound:
        return None
    except (TemplateError, UnicodeDecodeError, OSError) as e:
        logger.warning("Ignoring error page template {}: {}", name, e)
        return None


def select_template(templates: Optional[TemplateSet], status_code: int, prefix: str = "", suffix: str = "") -> Template:
    """Returns the template to render for `status_code`.

    A template named by the code (eg. "404") wins over the generic "error"
    template. If `templates` is None or holds neither, `default_template` is
    returned. `prefix` and `suffix` are added around both names, so
    ``prefix="errors/", suffix=".html"`` looks up "errors/404.html".
    """
    if templates is None:
        return default_template

    for name in (str(int(status_code)), GENERIC_TEMPLATE_NAME):
        template = _lookup(templates, f"{prefix}{name}{suffix}")
        if template is not None:
            return template
        logger.debug("No error page template named {!r}", f"{prefix}{name}{suffix}")

    return default_template
