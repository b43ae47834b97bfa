ALI_URL = "https://www.aliexpress.com/item/1005006123456789.html"


def make_page(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"
