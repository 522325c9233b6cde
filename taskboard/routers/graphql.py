# taskboard/routers/graphql.py
from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import GraphQLRouter

from taskboard.api.context import GraphQLContext
from taskboard.api.schema import schema
from taskboard.config.settings import settings
from taskboard.database import get_db


# A fresh context (session, query objects, loaders) for every request
async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    return GraphQLContext(db)


router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.graphiql_enabled else None,
)
