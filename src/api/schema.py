"""GraphQL schema combining the query and mutation roots."""

import strawberry

from api.resolvers.library import Mutation, Query

schema = strawberry.Schema(query=Query, mutation=Mutation)
