import json

from core.container import Container


class TestContainer:
    def test_seeds_demo_users(self, media_root) -> None:
        container = Container(media_root=str(media_root), seed_demo_users=True)

        assert [user.email for user in container.user_repository.get_all()] == [
            "john@example.com",
            "jane@example.com",
            "bob@example.com",
        ]

    def test_from_env(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("MEDIA_STORAGE_ROOT", str(tmp_path / "env-root"))
        monkeypatch.setenv("SEED_DEMO_USERS", "true")

        container = Container.from_env()

        assert (tmp_path / "env-root").is_dir()
        assert len(container.user_repository.get_all()) == 3

    def test_resolvers_share_state(self, container, make_event, lambda_context) -> None:
        first = container.build_resolver()
        second = container.build_resolver()

        first.resolve(make_event("POST", "/users", body={"name": "Ann", "email": "a@x.com", "age": 22}), lambda_context)
        response = second.resolve(make_event("GET", "/users"), lambda_context)

        assert len(json.loads(response["body"])) == 1

    def test_unexpected_error_maps_to_500(self, container, app, make_event, lambda_context, monkeypatch) -> None:
        def explode(*args, **kwargs):
            raise KeyError("boom")

        monkeypatch.setattr(container.user_service, "get_all_users", explode)

        response = app.resolve(make_event("GET", "/users"), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"] == "Internal server error"
