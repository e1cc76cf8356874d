from typing import Any, Optional

from quart import Request, request

from valdn.exceptions.common_exceptions import PayloadDecodeException
from valdn.utils.json_utils import parse_json

JSON_MIMETYPE = "application/json"
FORM_MIMETYPE = "application/x-www-form-urlencoded"
MULTIPART_MIMETYPE = "multipart/form-data"


def multidict_to_map(multi) -> dict[str, Any]:
    """Convert a MultiDict (query args, form, files) to a plain dict.

    Repeated keys (?tag=a&tag=b) and the key[] style (?tag[]=a) become lists,
    single values stay scalars.
    """
    data: dict[str, Any] = {}
    for key in multi.keys():
        values = multi.getlist(key)
        if key.endswith("[]"):
            data[key[:-2]] = list(values)
        elif len(values) == 1:
            data[key] = values[0]
        else:
            data[key] = list(values)
    return data


def is_json_mimetype(mimetype: str) -> bool:
    return mimetype == JSON_MIMETYPE or mimetype.endswith("+json")


async def query_to_map(req: Optional[Request] = None) -> dict[str, Any]:
    """Request query as a canonical map; async like `body_to_map` so both are awaited alike."""
    req = req if req is not None else request
    return multidict_to_map(req.args)


async def body_to_map(req: Optional[Request] = None) -> dict[str, Any]:
    """Decode the request body according to its content type.

    Raises:
        PayloadDecodeException: If the body does not match its content type.
    """
    req = req if req is not None else request
    mimetype = req.mimetype or ""

    if is_json_mimetype(mimetype):
        raw = await req.get_data(as_text=True)
        if not raw.strip():
            return {}
        body = parse_json(raw)
        if not isinstance(body, dict):
            raise PayloadDecodeException("JSON body must be an object", error_type="invalid_json_body")
        return body

    if mimetype == FORM_MIMETYPE:
        return multidict_to_map(await req.form)

    if mimetype == MULTIPART_MIMETYPE:
        data = multidict_to_map(await req.form)
        data.update(multidict_to_map(await req.files))
        return data

    raw = await req.get_data()
    if raw:
        raise PayloadDecodeException(f"Unsupported content type `{mimetype}`", error_type="unsupported_content_type")
    return {}


async def request_to_map(req: Optional[Request] = None) -> dict[str, Any]:
    """Merge query parameters and the decoded body into one map. Body keys win."""
    data = await query_to_map(req)
    data.update(await body_to_map(req))
    return data
