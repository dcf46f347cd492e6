"""
Shared upstream stubs for the test modules
"""
import httpx


class KeepOrder:
    """Random source that leaves the pool order unchanged"""

    def shuffle(self, items):
        pass


class Upstream:
    """Mock upstream recording every user_id it is asked about"""

    def __init__(self, behaviours=None):
        self.behaviours = behaviours or {}
        self.calls = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        user_id = request.url.params["user_id"]
        self.calls.append(user_id)
        return self.behaviours[user_id](request)


def success(solution):
    return lambda request: httpx.Response(200, json={"status": "success", "message": "ok", "data": {"solution": solution}})


def not_found(message="not found"):
    return lambda request: httpx.Response(200, json={"status": "error", "message": message})


def connection_refused(request):
    raise httpx.ConnectError("Connection refused", request=request)
