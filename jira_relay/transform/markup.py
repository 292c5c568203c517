"""Translation of Jira wiki markup into Mattermost markdown."""

import re
from typing import Dict, List, Tuple

# Earlier entries win when several tokens match at the same position.
WIKI_RULES: List[Tuple[str, str]] = [
    (":)", ":simple_smile:"),
    (":(", ":worried:"),
    # leading space keeps xml namespaces like "ns:Data" intact
    (" :P", ":stuck_out_tongue_winking_eye:"),
    (" :D", ":grinning:"),
    (";)", ":wink:"),
    ("(y)", ":thumbsup:"),
    ("(n)", ":thumbsdown:"),
    ("(i)", ":information_source:"),
    ("(/)", ":white_check_mark:"),
    ("(x)", ":x:"),
    ("(!)", ":warning:"),
    ("(-)", ":no_entry:"),
    ("(?)", ":question:"),
    ("(on)", ":bulb:"),
    ("(*)", ":star:"),
    ("----", "---"),
    ("{code}", "```"),
    ("{code:xml}", "```xml "),
    ("{code:java}", "```java "),
    ("{code:javascript}", "```javascript "),
    ("{code:sql}", "```sql "),
    ("# ", "1. "),
    ("## ", "  1. "),
    ("### ", "    1. "),
    ("** ", "  * "),
    ("*** ", "    * "),
    ("-- ", "  * "),
    ("--- ", "    * "),
    ("h1.", "#"),
    ("h2.", "##"),
    ("h3.", "###"),
    ("h4.", "####"),
    ("h5.", "#####"),
    ("h6.", "######"),
]


class MarkupTranslator:
    """Single-pass, priority-ordered token replacer.

    All rules are compiled into one alternation, so text produced by a
    replacement is never matched again.
    """

    def __init__(self, rules: List[Tuple[str, str]]):
        self._replacements: Dict[str, str] = {}
        for source, target in rules:
            self._replacements.setdefault(source, target)
        self._pattern = re.compile("|".join(re.escape(source) for source in self._replacements))

    def translate(self, text: str) -> str:
        if not text:
            return text
        return self._pattern.sub(lambda match: self._replacements[match.group(0)], text)


_default_translator = MarkupTranslator(WIKI_RULES)


def translate(text: str) -> str:
    """Rewrite Jira wiki markup in ``text`` using the default rule table."""
    return _default_translator.translate(text)
