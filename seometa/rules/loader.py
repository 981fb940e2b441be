import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from seometa.rules.models import SeoRules

logger = logging.getLogger(__name__)


def load_rules(path: Path) -> SeoRules:
    """
    Load and validate the SEO rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"SEO rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in SEO rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        rules = SeoRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"SEO rules validation failed:\n{e}") from e

    logger.debug("Loaded SEO rules from %s", path)
    return rules
