import pytest

from json_server_swagger.errors import InvalidCollectionNameError
from json_server_swagger.generator.naming import capitalize, derive_type_name, nested_type_name


class TestDeriveTypeName:
    def test_plural_is_singularized(self):
        assert derive_type_name("posts") == "Post"

    def test_only_one_trailing_s_removed(self):
        assert derive_type_name("address") == "Addres"
        assert derive_type_name("glass") == "Glas"

    def test_no_irregular_plurals(self):
        assert derive_type_name("news") == "New"

    def test_singular_only_capitalized(self):
        assert derive_type_name("data") == "Data"

    def test_rest_of_name_unchanged(self):
        assert derive_type_name("blogPosts") == "BlogPost"
        assert derive_type_name("user_roles") == "User_role"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidCollectionNameError):
            derive_type_name("")

    def test_empty_name_error_is_value_error(self):
        with pytest.raises(ValueError):
            derive_type_name("")

    def test_lone_s_rejected(self):
        with pytest.raises(InvalidCollectionNameError, match="empty type name"):
            derive_type_name("s")

    def test_non_string_name_rejected(self):
        with pytest.raises(InvalidCollectionNameError, match="must be a string"):
            derive_type_name(True)


class TestNestedTypeName:
    def test_concatenates_capitalized_property(self):
        assert nested_type_name("Post", "author") == "PostAuthor"

    def test_capitalize_keeps_tail(self):
        assert capitalize("createdBy") == "CreatedBy"
        assert capitalize("") == ""
