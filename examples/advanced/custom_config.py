"""Change fallback labels and allowed link schemes per processor."""

from chatmark import Chatmark, RenderConfig

strict = Chatmark(
    config=RenderConfig(
        user_fallback_template="unknown user",
        role_fallback_template="role #{suffix}",
        role_suffix_length=6,
        link_schemes=("https://",),
    )
)

print(strict("<@1> <@&123456789> [insecure](http://x.io) [ok](https://x.io)"))
