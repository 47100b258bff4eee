"""Resolve mentions and custom emoji against a lookup snapshot."""

from chatmark import LookupTables, collect_references, parse, render, render_text

message = "hey <@1001>, <@&9001234> shipped it :party: (see `<@1002>`)"

# Ask the backend only for what the message references
refs = collect_references(message)
print("Fetch users:", refs.user_ids)
print("Fetch roles:", refs.role_ids)
print("Fetch emoji:", refs.emoji_shortcodes)

lookups = LookupTables.from_raw(
    users={"1001": "ada"},
    roles={},
    emojis=[{"id": 77, "name": "party", "url": "https://cdn.example/77.gif", "animated": True}],
)

doc = parse(message, lookups)
print(render(doc))
print(render_text(doc))
