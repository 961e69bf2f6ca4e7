class RequestMethods:
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


def bearer_header(token):
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}
