from typing import Annotated

from api_spec_scanner.extractor.base import ParameterKind
from api_spec_scanner.extractor.parameter import ParameterExtractor
from api_spec_scanner.registry import RequestBody, RequestParam

from sample_app import UserController, list_products


def _by_name(params):
    return {p.name: p for p in params}


class TestParameterExtractor:
    def test_path_variable(self):
        params = ParameterExtractor().extract(UserController.get_user)
        assert len(params) == 1
        p = params[0]
        assert p.name == "user_id"
        assert p.kind is ParameterKind.PATH_VARIABLE
        assert p.param_name == "id"
        assert p.required is True
        assert p.type.simple_name == "int"
        assert p.type_schema is None

    def test_request_params_from_metadata_and_default(self):
        params = _by_name(ParameterExtractor().extract(UserController.list_users))
        assert params["page"].kind is ParameterKind.REQUEST_PARAM
        assert params["page"].param_name == "page"
        assert params["page"].required is False
        assert params["page"].default_value == "0"
        assert params["size"].param_name == "pageSize"
        assert params["size"].default_value == "20"

    def test_request_body_gets_schema(self):
        params = _by_name(ParameterExtractor().extract(UserController.create_user))
        body = params["user"]
        assert body.kind is ParameterKind.REQUEST_BODY
        assert body.required is True
        assert body.param_name is None
        assert body.type.simple_name == "UserDTO"
        assert [f.name for f in body.type_schema.fields][:3] == ["id", "name", "email"]

    def test_request_header(self):
        params = _by_name(ParameterExtractor().extract(UserController.create_user))
        header = params["token"]
        assert header.kind is ParameterKind.REQUEST_HEADER
        assert header.param_name == "X-Auth-Token"
        assert header.required is True
        assert header.default_value is None

    def test_optional_query_param(self):
        params = ParameterExtractor().extract(list_products)
        assert params[0].kind is ParameterKind.REQUEST_PARAM
        assert params[0].param_name == "category"
        assert params[0].required is False
        assert params[0].type.simple_name == "str"

    def test_unbound_and_variadic_parameters(self):
        def handler(request, *args, limit: int = 10, **kwargs):
            pass

        params = ParameterExtractor().extract(handler)
        assert [p.name for p in params] == ["request", "limit"]
        assert all(p.kind is ParameterKind.OTHER for p in params)
        assert params[0].type.simple_name == "Any"
        assert params[1].required is None

    def test_body_wins_over_other_bindings(self):
        def handler(payload: Annotated[dict, RequestParam("p"), RequestBody()]):
            pass

        assert ParameterExtractor().extract(handler)[0].kind is ParameterKind.REQUEST_BODY

    def test_integer_default_is_rendered_as_text(self):
        def handler(limit: int = RequestParam(required=False, default=25)):
            pass

        assert ParameterExtractor().extract(handler)[0].default_value == "25"

    def test_serialized_form_omits_absent_members(self):
        p = ParameterExtractor().extract(UserController.get_user)[0]
        assert p.model_dump(by_alias=True, exclude_none=True, mode="json") == {
            "name": "user_id",
            "type": {"simpleName": "int", "fullName": "int", "kind": "primitive", "typeArguments": []},
            "kind": "PATH_VARIABLE",
            "paramName": "id",
            "required": True,
        }
