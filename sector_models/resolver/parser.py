"""Parser for the two-level models.yml dialect.

The dialect is deliberately tiny and is *not* YAML::

    <sector>:
      <provider>: <model>
      <provider>: <model>

Only full-line ``#`` comments are recognised. There is no quoting, no lists and
no nesting beyond sector/provider. Values are kept as raw, stripped strings.

Lines are split on ``\\n`` only; a trailing ``\\r`` goes with the rest of the
surrounding whitespace. Whitespace between a key and its ``:`` is not part of
the key, so ``openai : m`` and ``openai: m`` name the same provider.
"""

from ..models.resolution import ModelMapping


def _indentation(line: str) -> int:
    return len(line) - len(line.lstrip())


def parse_models(text: str) -> ModelMapping:
    """Parse models.yml text into a sector -> provider -> model mapping.

    Malformed lines are skipped, never reported:

    - a top-level ``key: value`` line is ignored and does not close the
      current section;
    - an indented line before any section header, or without a value, adds
      nothing.
    """
    models: ModelMapping = {}
    section = None

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indentation(line)
        key, _, value = stripped.partition(":")
        key = key.rstrip()
        value = value.strip()

        if indent == 0:
            if value:
                continue
            section = key
            models[section] = {}
        elif section is not None and value:
            models[section][key] = value

    return models
