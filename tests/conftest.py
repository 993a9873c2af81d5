"""Shared test fixtures for prisma-vars tests."""

from __future__ import annotations

from typing import Any

import pytest

from prisma_vars.commands.schema.loader import sdl_to_introspection
from prisma_vars.variables.diagnostics import Diagnostics
from prisma_vars.variables.index import IntrospectionIndex
from prisma_vars.variables.types import Resource

# Prisma 1 style generated schema for a small blog
BLOG_SDL = """
type Query {
  posts(where: PostWhereInput, orderBy: String, skip: Int, first: Int): [Post!]!
}

enum PostStatus { DRAFT PUBLISHED }

type Author { id: ID! name: String! }
type Tag { id: ID! name: String! }
type Comment { id: ID! body: String! }

type Post {
  id: ID!
  title: String!
  views: Int!
  rating: Float
  status: PostStatus!
  author: Author
  tags: [Tag!]!
  comments: [Comment!]!
  keywords: [String!]!
}

input PostWhereInput {
  id: ID
  id_in: [ID!]
  title: String
  views: Int
  status_in: [PostStatus!]
  author: AuthorWhereInput
  tags_some: TagWhereInput
  comments_some: CommentWhereInput
}
input AuthorWhereInput { id: ID id_in: [ID!] }
input TagWhereInput { id: ID id_in: [ID!] name_in: [String!] }
input CommentWhereInput { id: ID id_in: [ID!] }

input AuthorWhereUniqueInput { id: ID }
input TagWhereUniqueInput { id: ID }
input CommentWhereUniqueInput { id: ID }

input PostCreateInput {
  title: String!
  views: Int
  status: PostStatus
  author: AuthorCreateOneInput
  tags: TagCreateManyInput
  comments: CommentCreateManyInput
  keywords: PostCreatekeywordsInput
}
input PostCreatekeywordsInput { set: [String!] }
input AuthorCreateOneInput { connect: AuthorWhereUniqueInput create: AuthorCreateInput }
input AuthorCreateInput { name: String! }
input TagCreateManyInput { connect: [TagWhereUniqueInput!] create: [TagCreateInput!] }
input TagCreateInput { name: String! }
input CommentCreateManyInput { create: [CommentCreateInput!] }
input CommentCreateInput { body: String! }

input PostUpdateInput {
  title: String
  views: Int
  status: PostStatus
  author: AuthorUpdateOneInput
  tags: TagUpdateManyInput
  comments: CommentUpdateManyInput
  keywords: PostUpdatekeywordsInput
}
input PostUpdatekeywordsInput { set: [String!] }
input AuthorUpdateOneInput {
  connect: AuthorWhereUniqueInput
  create: AuthorCreateInput
  update: AuthorUpdateDataInput
  disconnect: Boolean
  delete: Boolean
}
input AuthorUpdateDataInput { name: String }
input TagUpdateManyInput {
  connect: [TagWhereUniqueInput!]
  disconnect: [TagWhereUniqueInput!]
  create: [TagCreateInput!]
  update: [TagUpdateWithWhereUniqueNestedInput!]
}
input TagUpdateWithWhereUniqueNestedInput {
  where: TagWhereUniqueInput!
  data: TagUpdateDataInput!
}
input TagUpdateDataInput { name: String }
input CommentUpdateManyInput {
  create: [CommentCreateInput!]
  update: [CommentUpdateWithWhereUniqueNestedInput!]
  delete: [CommentWhereUniqueInput!]
}
input CommentUpdateWithWhereUniqueNestedInput {
  where: CommentWhereUniqueInput!
  data: CommentUpdateDataInput!
}
input CommentUpdateDataInput { body: String }
"""


def index_from_sdl(sdl: str) -> IntrospectionIndex:
    """Introspect an SDL schema with graphql-core and index the result."""
    return IntrospectionIndex.from_data(sdl_to_introspection(sdl))


def input_object(name: str, fields: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Hand-written INPUT_OBJECT introspection entry."""
    return {
        "kind": "INPUT_OBJECT",
        "name": name,
        "inputFields": [{"name": k, "type": v} for k, v in fields.items()],
    }


def non_null(kind: str, name: str) -> dict[str, Any]:
    return {"kind": "NON_NULL", "ofType": {"kind": kind, "name": name}}


@pytest.fixture(scope="session")
def blog_index() -> IntrospectionIndex:
    return index_from_sdl(BLOG_SDL)


@pytest.fixture
def post(blog_index: IntrospectionIndex) -> Resource:
    return Resource.from_index(blog_index, "Post")


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def minimal_create_index() -> IntrospectionIndex:
    """Partial introspection in the shape an admin UI test would hand-write."""
    return IntrospectionIndex.from_data(
        {
            "types": [
                {"name": "Post", "fields": [{"name": "title"}]},
                input_object(
                    "PostCreateInput",
                    {
                        "author": non_null("INPUT_OBJECT", "AuthorCreateOneInput"),
                        "tags": non_null("INPUT_OBJECT", "TagCreateManyInput"),
                        "title": non_null("SCALAR", "String"),
                    },
                ),
                input_object(
                    "AuthorCreateOneInput",
                    {"connect": non_null("INPUT_OBJECT", "AuthorWhereUniqueInput")},
                ),
                input_object(
                    "AuthorWhereUniqueInput", {"id": {"kind": "SCALAR", "name": "String"}}
                ),
                input_object(
                    "TagCreateManyInput",
                    {"connect": non_null("INPUT_OBJECT", "TagWhereUniqueInput")},
                ),
                input_object(
                    "TagWhereUniqueInput", {"id": {"kind": "SCALAR", "name": "String"}}
                ),
            ]
        }
    )
