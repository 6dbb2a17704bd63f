from json_server_swagger.generator.paths import synthesize_paths


def _paths(type_name="Post", collection="posts", is_list=True) -> dict:
    paths = {}
    synthesize_paths(paths, type_name, collection, is_list)
    return paths


class TestCollectionPath:
    def test_list_get(self):
        get = _paths()["/posts"]["get"]
        assert get["operationId"] == "getallPost"
        assert get["summary"] == "Get all Posts"
        assert get["responses"]["200"]["schema"] == {
            "type": "array",
            "items": {"$ref": "#/definitions/Post"},
        }

    def test_singleton_get(self):
        get = _paths("Profile", "profile", is_list=False)["/profile"]["get"]
        assert get["operationId"] == "getProfile"
        assert get["summary"] == "Get the Profile"
        assert get["responses"]["200"]["schema"] == {"$ref": "#/definitions/Profile"}

    def test_post(self):
        post = _paths()["/posts"]["post"]
        assert post["operationId"] == "postPost"
        assert post["parameters"] == [
            {
                "in": "body",
                "name": "bodyAddPost",
                "description": "Post object to be added",
                "required": True,
                "schema": {"$ref": "#/definitions/Post"},
            }
        ]
        assert post["responses"]["200"]["schema"] == {"$ref": "#/definitions/Post"}

    def test_no_delete(self):
        paths = _paths()
        assert all("delete" not in entry for entry in paths.values())


class TestIndividualPath:
    def test_only_for_lists(self):
        assert list(_paths()) == ["/posts", "/posts/{id}"]
        assert list(_paths("Profile", "profile", is_list=False)) == ["/profile"]

    def test_id_parameter(self):
        entry = _paths()["/posts/{id}"]
        assert entry["parameters"] == [
            {"name": "id", "in": "path", "required": True, "type": "integer", "format": "int64"}
        ]

    def test_get(self):
        get = _paths()["/posts/{id}"]["get"]
        assert get["operationId"] == "getPostIndividual"
        assert get["responses"]["200"]["schema"] == {"$ref": "#/definitions/Post"}
        assert get["responses"]["404"]["schema"] == {"$ref": "#/definitions/ErrorResponse"}

    def test_patch_and_put_mirror_each_other(self):
        entry = _paths()["/posts/{id}"]
        patch, put = entry["patch"], entry["put"]

        assert patch["operationId"] == "patchPostIndividual"
        assert put["operationId"] == "putPostIndividual"
        assert patch["summary"].startswith("Patch")
        assert put["summary"].startswith("Put")
        assert patch["responses"] == put["responses"] == entry["get"]["responses"]
        for op in (patch, put):
            body = op["parameters"][0]
            assert body["in"] == "body"
            assert body["name"] == "bodyAddPost"
            assert body["required"] is True
            assert body["schema"] == {"$ref": "#/definitions/Post"}

    def test_responses_not_shared_between_operations(self):
        entry = _paths()["/posts/{id}"]
        assert entry["patch"]["responses"] is not entry["put"]["responses"]
