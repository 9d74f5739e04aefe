import json
import os

from handlers.api import handler as api


class TestApiHandler:
    def test_routes_event_through_shared_resolver(self, make_event, lambda_context) -> None:
        created = api.handler(
            make_event("POST", "/users", body={"name": "Ann", "email": "a@x.com", "age": 22}),
            lambda_context,
        )
        user_id = json.loads(created["body"])["id"]

        fetched = api.handler(make_event("GET", f"/users/{user_id}"), lambda_context)

        assert created["statusCode"] == 201
        assert fetched["statusCode"] == 200
        assert json.loads(fetched["body"])["name"] == "Ann"

    def test_media_root_comes_from_environment(self) -> None:
        assert str(api.container.file_storage.root) == os.path.realpath(os.environ["MEDIA_STORAGE_ROOT"])

    def test_unauthorized_request(self, make_event, lambda_context) -> None:
        response = api.handler(make_event("GET", "/media", authorized=False), lambda_context)

        assert response["statusCode"] == 401
