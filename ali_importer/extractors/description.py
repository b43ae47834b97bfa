import html as html_lib

from .base import meta_contents

DESCRIPTION_KEYS = ("description", "og:description")


def extract_description(html: str) -> str:
    # first meta whose name or property is description / og:description
    for content in meta_contents(html, properties=DESCRIPTION_KEYS, names=DESCRIPTION_KEYS):
        text = html_lib.unescape(content).strip()
        if text:
            return text
    return ""
