"""
Generic CRUD accessor for FreshBooks accounting resources.

One AccountingResource covers one REST sub-path (``users/clients``,
``invoices/invoices``, ...). Requests go to
``{api_base_url}/{sub_path}/{account_id}[/{entity_id}]`` and bodies are
wrapped in the resource's singular key, e.g. ``{"client": {...}}``.
"""

import logging
from typing import Any
from typing import Generic
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import TypeVar
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from freshbooks_sdk.exceptions import ApiError
from freshbooks_sdk.exceptions import ConfigurationError
from freshbooks_sdk.exceptions import DecodeError
from freshbooks_sdk.exceptions import NotFoundError
from freshbooks_sdk.exceptions import ValidationError
from freshbooks_sdk.http_client import DELETE
from freshbooks_sdk.http_client import GET
from freshbooks_sdk.http_client import POST
from freshbooks_sdk.http_client import PUT
from freshbooks_sdk.http_client import HttpClient
from freshbooks_sdk.models import EntityList
from freshbooks_sdk.models import FreshBooksModel
from freshbooks_sdk.models import VisState
from freshbooks_sdk.responses import error_code
from freshbooks_sdk.responses import error_message
from freshbooks_sdk.responses import field_errors
from freshbooks_sdk.responses import read_json
from freshbooks_sdk.responses import unwrap_envelope
from freshbooks_sdk.transport.base import TransportResponse

logger = logging.getLogger("freshbooks_sdk.accounting")

EntityT = TypeVar("EntityT", bound=FreshBooksModel)
ListT = TypeVar("ListT", bound=EntityList)

Payload = Union[Mapping[str, Any], FreshBooksModel]

# 410 means the entity is already gone, which is what delete asked for.
_GONE = 410


def build_list_params(
    filters: Optional[Mapping[str, Any]] = None,
    includes: Optional[Sequence[str]] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> list[tuple[str, Any]]:
    """
    Query parameters for a list call, as ordered pairs.

    Filters become ``search[<name>]=<value>``; list or tuple values become a
    repeated ``search[<name>][]``. Includes become repeated ``include[]``.
    """
    params: list[tuple[str, Any]] = []
    if page is not None:
        params.append(("page", page))
    if per_page is not None:
        params.append(("per_page", per_page))
    for name, value in (filters or {}).items():
        if isinstance(value, (list, tuple)):
            params.extend((f"search[{name}][]", item) for item in value)
        elif isinstance(value, bool):
            params.append((f"search[{name}]", str(value).lower()))
        else:
            params.append((f"search[{name}]", value))
    for include in includes or ():
        params.append(("include[]", include))
    return params


class AccountingResource(Generic[EntityT, ListT]):
    """
    get/list/create/update/delete over a single accounting sub-path.

    Args:
        http (HttpClient): Shared client; not owned by the resource.
        sub_path (str): Path below the API base, e.g. ``"invoices/invoices"``.
        single_key (str): Wrapper key for one entity, e.g. ``"invoice"``.
        list_key (str): Wrapper key for a page of entities, e.g. ``"invoices"``.
        model (type): Entity model used to decode single results.
        list_model (type): EntityList subclass used to decode list results.
        delete_via_update (bool): Delete by setting ``vis_state`` to DELETED
            instead of issuing an HTTP DELETE.
    """

    def __init__(
        self,
        http: HttpClient,
        sub_path: str,
        single_key: str,
        list_key: str,
        model: type[EntityT],
        list_model: type[ListT],
        delete_via_update: bool = True,
    ):
        self.http = http
        self.sub_path = sub_path.strip("/")
        self.single_key = single_key
        self.list_key = list_key
        self.model = model
        self.list_model = list_model
        self.delete_via_update = delete_via_update

    def _url(self, account_id: str, entity_id: Optional[Union[int, str]] = None) -> str:
        url = f"{self.sub_path}/{account_id}"
        if entity_id is not None:
            url = f"{url}/{entity_id}"
        return url

    def _wrap(self, data: Payload) -> dict[str, Any]:
        if isinstance(data, FreshBooksModel):
            body = data.model_dump(
                mode="json", by_alias=True, exclude_none=True, exclude={"id"}
            )
        else:
            body = dict(data)
        return {self.single_key: body}

    async def _request(
        self,
        method: str,
        url: str,
        params: Any = None,
        json: Any = None,
    ) -> tuple[TransportResponse, Any]:
        if not self.http.is_authenticated:
            raise ConfigurationError("access_token must be configured")

        response = await self.http.request(method, url, params=params, json=json)
        data = read_json(response)
        if not response.is_success:
            self._raise_for_status(response, data)
        return response, data

    def _raise_for_status(self, response: TransportResponse, data: Any) -> None:
        message = error_message(response, data)
        code = error_code(data)
        logger.debug(f"{self.sub_path}: {response.status_code} {message}")

        if response.status_code == 404:
            raise NotFoundError(message, response.status_code, details=data, error_code=code)
        if 400 <= response.status_code < 500:
            errors = field_errors(data)
            if errors:
                raise ValidationError(
                    message, response.status_code, errors, details=data, error_code=code
                )
        raise ApiError(message, response.status_code, details=data, error_code=code)

    def _result(self, response: TransportResponse, data: Any, key: str) -> Any:
        if data is None:
            raise DecodeError(
                "Response body is not JSON",
                details=response.text,
                status_code=response.status_code,
            )
        result = unwrap_envelope(data)
        if not isinstance(result, dict) or key not in result:
            raise DecodeError(
                f"Response missing '{key}'",
                details=data,
                status_code=response.status_code,
            )
        if result[key] is None:
            raise DecodeError(
                f"Response '{key}' is null",
                details=data,
                status_code=response.status_code,
            )
        return result

    def _decode_entity(self, response: TransportResponse, data: Any) -> EntityT:
        result = self._result(response, data, self.single_key)
        try:
            return self.model.model_validate(result[self.single_key])
        except PydanticValidationError as exc:
            raise DecodeError(
                f"Unexpected '{self.single_key}' shape",
                details=exc.errors(include_input=False),
                status_code=response.status_code,
            ) from exc

    def _decode_list(self, response: TransportResponse, data: Any) -> ListT:
        result = self._result(response, data, self.list_key)
        items = result[self.list_key]
        if not isinstance(items, list):
            raise DecodeError(
                f"Response '{self.list_key}' is not a list",
                details=data,
                status_code=response.status_code,
            )
        try:
            return self.list_model.model_validate(
                {
                    "items": items,
                    "page": result.get("page", 1),
                    "pages": result.get("pages", 1 if items else 0),
                    "per_page": result.get("per_page", len(items)),
                    "total": result.get("total", len(items)),
                }
            )
        except PydanticValidationError as exc:
            raise DecodeError(
                f"Unexpected '{self.list_key}' shape",
                details=exc.errors(include_input=False),
                status_code=response.status_code,
            ) from exc

    async def get(self, account_id: str, entity_id: Union[int, str]) -> EntityT:
        """
        Fetch one entity.

        Raises:
            NotFoundError: If the entity does not exist.
            ApiError: On any other non-2xx status.
            DecodeError: If the body does not contain the entity.
        """
        response, data = await self._request(GET, self._url(account_id, entity_id))
        return self._decode_entity(response, data)

    async def list(
        self,
        account_id: str,
        filters: Optional[Mapping[str, Any]] = None,
        includes: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> ListT:
        """
        Fetch one page of entities. An empty page is a normal result.

        Args:
            account_id (str): FreshBooks account the entities belong to.
            filters (Mapping | None): Search filters, sent as ``search[<name>]``.
            includes (Sequence[str] | None): Extra data to include, sent as ``include[]``.
            page (int | None): 1-based page number.
            per_page (int | None): Page size.
        """
        params = build_list_params(filters, includes, page, per_page)
        response, data = await self._request(
            GET, self._url(account_id), params=params or None
        )
        return self._decode_list(response, data)

    async def create(self, account_id: str, data: Payload) -> EntityT:
        """
        Create an entity. ``data`` is a mapping or a model; a model's ``id`` is not sent.

        Raises:
            ValidationError: If FreshBooks rejects fields of the payload.
            ApiError: On any other non-2xx status.
        """
        response, body = await self._request(
            POST, self._url(account_id), json=self._wrap(data)
        )
        return self._decode_entity(response, body)

    async def update(
        self, account_id: str, entity_id: Union[int, str], data: Payload
    ) -> EntityT:
        """
        Update an entity with the given fields.

        Raises:
            NotFoundError: If the entity does not exist.
            ValidationError: If FreshBooks rejects fields of the payload.
            ApiError: On any other non-2xx status.
        """
        response, body = await self._request(
            PUT, self._url(account_id, entity_id), json=self._wrap(data)
        )
        return self._decode_entity(response, body)

    async def delete(self, account_id: str, entity_id: Union[int, str]) -> None:
        """
        Delete an entity.

        Resources deleted via update are marked ``vis_state=DELETED``; the rest
        get an HTTP DELETE. Deleting an entity that is already gone succeeds.

        Raises:
            NotFoundError: If the entity never existed.
            ApiError: On any other non-2xx status.
        """
        if self.delete_via_update:
            await self.update(account_id, entity_id, {"vis_state": int(VisState.DELETED)})
            return

        if not self.http.is_authenticated:
            raise ConfigurationError("access_token must be configured")
        response = await self.http.delete(self._url(account_id, entity_id))
        if response.is_success or response.status_code == _GONE:
            return
        self._raise_for_status(response, read_json(response))
