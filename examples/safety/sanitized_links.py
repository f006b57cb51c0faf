"""Drop javascript: links from untrusted documents."""

from huellas import HtmlRenderer

r = HtmlRenderer(sanitize=True)
for href in ["https://example.com", "javascript:alert(1)", "jav&#x09;ascript:alert(1)", "%E0%A4%A"]:
    print(repr(href), "->", repr(r.link(href, None, "click")))
