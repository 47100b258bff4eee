"""Ship a parsed message to a client as JSON."""

from chatmark import parse
from chatmark.serialization import from_json, to_json

doc = parse("## Deploy\n- <@1> approved\n```sh\nmake release\n```")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
