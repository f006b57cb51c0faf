"""Render a few constructs by hand, the way a tokenizer would."""

from huellas import HtmlRenderer

r = HtmlRenderer()
link = r.link("https://example.com", None, "a link")
html = (
    r.heading("Hello <strong>World</strong>", 1, "Hello **World**")
    + r.paragraph("Text with " + r.codespan("code") + " and " + link)
    + r.code("print('hi')", "python")
)
print(html)
