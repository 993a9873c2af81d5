"""Tests for the introspection index."""

from __future__ import annotations

from prisma_vars.formats.introspection import TypeRef
from prisma_vars.variables.index import IntrospectionIndex


class TestFinalType:
    def test_unwraps_non_null_list_non_null(self):
        ref = TypeRef.model_validate(
            {
                "kind": "NON_NULL",
                "ofType": {
                    "kind": "LIST",
                    "ofType": {"kind": "NON_NULL", "ofType": {"kind": "INPUT_OBJECT", "name": "TagWhereUniqueInput"}},
                },
            }
        )
        final = IntrospectionIndex.final_type(ref)
        assert final.name == "TagWhereUniqueInput"
        assert final.kind == "INPUT_OBJECT"

    def test_named_type_returned_as_is(self):
        ref = TypeRef(kind="SCALAR", name="String")
        assert IntrospectionIndex.final_type(ref) is ref

    def test_wrapper_without_of_type_stops(self):
        ref = TypeRef(kind="NON_NULL")
        final = IntrospectionIndex.final_type(ref)
        assert final.kind == "NON_NULL"
        assert final.name is None


class TestLookups:
    def test_type_by_name(self, blog_index: IntrospectionIndex):
        post = blog_index.type_by_name("Post")
        assert post is not None
        assert post.kind == "OBJECT"
        assert blog_index.type_by_name("Nope") is None

    def test_input_field_unwraps(self, blog_index: IntrospectionIndex):
        ref = blog_index.input_field("PostCreateInput", "title")
        assert ref is not None
        assert ref.kind == "SCALAR"
        assert ref.name == "String"

    def test_input_field_relation(self, blog_index: IntrospectionIndex):
        ref = blog_index.input_field("TagCreateManyInput", "connect")
        assert ref is not None
        assert ref.name == "TagWhereUniqueInput"

    def test_input_field_missing_type(self, blog_index: IntrospectionIndex):
        assert blog_index.input_field("MissingInput", "title") is None

    def test_input_field_missing_field(self, blog_index: IntrospectionIndex):
        assert blog_index.input_field("PostCreateInput", "nope") is None

    def test_input_field_on_object_type(self, blog_index: IntrospectionIndex):
        # OBJECT types have no input fields
        assert blog_index.input_field("Post", "title") is None

    def test_field_exists(self, blog_index: IntrospectionIndex):
        assert blog_index.field_exists("PostWhereInput", "tags_some")
        assert not blog_index.field_exists("PostWhereInput", "author_some")

    def test_object_field(self, blog_index: IntrospectionIndex):
        ref = blog_index.object_field("Post", "views")
        assert ref is not None
        assert ref.name == "Int"
        assert blog_index.object_field("Post", "nope") is None
        assert blog_index.object_field("PostCreateInput", "title") is None

    def test_input_field_names(self, blog_index: IntrospectionIndex):
        names = blog_index.input_field_names("TagUpdateWithWhereUniqueNestedInput")
        assert names == ["where", "data"]
        assert blog_index.input_field_names("Missing") == []

    def test_contains(self, blog_index: IntrospectionIndex):
        assert "PostCreateInput" in blog_index
        assert "Nope" not in blog_index


class TestFromData:
    def test_partial_types_are_tolerated(self):
        index = IntrospectionIndex.from_data(
            {
                "types": [
                    {"name": "Post", "fields": [{"name": "title"}]},
                    {"name": "PostWhereInput", "inputFields": [{"name": "tags_some", "type": {"kind": "", "name": ""}}]},
                ]
            }
        )
        assert index.field_exists("PostWhereInput", "tags_some")
        assert not index.field_exists("Post", "title")
        assert index.object_field("Post", "title") is not None

    def test_full_response_wrapper(self):
        index = IntrospectionIndex.from_data(
            {"data": {"__schema": {"types": [{"kind": "SCALAR", "name": "String"}]}}}
        )
        assert len(index) == 1
        assert index.type_by_name("String") is not None

    def test_empty(self):
        index = IntrospectionIndex.from_data({})
        assert len(index) == 0
        assert index.input_field("PostCreateInput", "title") is None

    def test_duplicate_names_keep_first(self):
        index = IntrospectionIndex.from_data(
            {"types": [{"kind": "OBJECT", "name": "Post"}, {"kind": "INPUT_OBJECT", "name": "Post"}]}
        )
        post = index.type_by_name("Post")
        assert post is not None
        assert post.kind == "OBJECT"
