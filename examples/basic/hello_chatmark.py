"""Parse and render a chat message in 3 lines."""

from chatmark import parse, render

doc = parse("# Hello <@42> :wave:")
html = render(doc)
print(html)
