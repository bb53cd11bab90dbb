"""Bearer token authentication.

Each issued token acts as the user's session: a request is authenticated only
when its `Authorization: Bearer <key>` header names an existing token.
"""

from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    keyword = "Bearer"
