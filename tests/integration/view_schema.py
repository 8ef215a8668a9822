"""
Graphene schema shared by the view integration tests.
"""

import asyncio

import graphene
from django.db import connection

EXECUTED_MUTATIONS = []


class Query(graphene.ObjectType):
    hello = graphene.String()
    echo = graphene.String(value=graphene.String())
    slow_echo = graphene.String(value=graphene.String(), delay=graphene.Float())
    context_path = graphene.String()
    root_greeting = graphene.String()
    fail = graphene.String()
    database_answer = graphene.Int()

    def resolve_hello(root, info):
        return "world"

    def resolve_echo(root, info, value=None):
        return value

    async def resolve_slow_echo(root, info, value=None, delay=0.0):
        await asyncio.sleep(delay or 0)
        return value

    def resolve_context_path(root, info):
        return info.context.path

    def resolve_root_greeting(root, info):
        return (root or {}).get("greeting")

    def resolve_database_answer(root, info):
        with connection.cursor() as cursor:
            cursor.execute("SELECT 41 + 1")
            return cursor.fetchone()[0]

    def resolve_fail(root, info):
        raise ValueError("boom")


class Mutation(graphene.ObjectType):
    do_thing = graphene.Boolean()

    def resolve_do_thing(root, info):
        EXECUTED_MUTATIONS.append(info.context)
        return True


class Subscription(graphene.ObjectType):
    count = graphene.Int()

    async def subscribe_count(root, info):
        for value in range(3):
            yield value


schema = graphene.Schema(query=Query, mutation=Mutation, subscription=Subscription)
