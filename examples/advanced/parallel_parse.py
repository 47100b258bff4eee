"""Thread safe: parse 1000 messages in parallel against one snapshot."""

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from chatmark import LookupTables, parse

lookups = LookupTables(users={str(i): f"user{i}" for i in range(1000)})
messages = [f"# Msg {i}\n\nping <@{i}>" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(partial(parse, lookups=lookups), messages))

print(f"Parsed {len(results)} messages in parallel")
print("First doc children:", len(results[0].children))
print("Last doc children:", len(results[-1].children))
