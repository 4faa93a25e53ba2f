from rest_framework.response import Response
from rest_framework import status


def api_success(data=None, msg=None, token=None, status_code=status.HTTP_200_OK):
    """
    Small helper to standardize success responses across the apps.
    Always returns: {"success": true, "msg"?, "data"?, "token"?}
    """
    body = {"success": True}
    if msg:
        body["msg"] = msg
    if data is not None:
        body["data"] = data
    if token:
        body["token"] = token
    return Response(body, status=status_code)
