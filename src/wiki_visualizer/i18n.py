# ABOUTME: Translated interface messages for the visualizer
# ABOUTME: $1 is the page name, $2 the project host (e.g. en.wikipedia.org)

import re

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "visualizer4mw": "Wikitable visualizer tool",
        "visualizer4mw-info": "Data source is $1 on $2.",
    },
    "fr": {
        "visualizer4mw": "Outil de visualisation de tableaux",
        "visualizer4mw-info": "La source des données est $1 sur $2.",
    },
    "hu": {
        "visualizer4mw": "Diagramvarázsló",
        "visualizer4mw-info": "Az adatok forrása a $2 $1 szócikke.",
    },
    "nl": {
        "visualizer4mw": "Hulpmiddel om Wikitable te visualiseren",
        "visualizer4mw-info": "De broncode is te vinden op $1 op $2.",
    },
}

DEFAULT_LANGUAGE = "en"

_PLACEHOLDER = re.compile(r"\$([1-9])")


def message(key: str, *args: str, lang: str = DEFAULT_LANGUAGE) -> str:
    """Look up ``key`` in ``lang`` (falling back to English) and fill $1, $2, ..."""
    text = MESSAGES.get(lang, {}).get(key) or MESSAGES[DEFAULT_LANGUAGE][key]

    def substitute(match: re.Match[str]) -> str:
        index = int(match.group(1)) - 1
        return args[index] if index < len(args) else match.group(0)

    return _PLACEHOLDER.sub(substitute, text)


def source_attribution(page: str, project: str, lang: str = DEFAULT_LANGUAGE) -> str:
    """'Data source is <page> on <project>.' with the page shown with spaces."""
    return message("visualizer4mw-info", page.replace("_", " "), project, lang=lang)
