"""FastAPI interface serving a schema and forwarding executions as events."""

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from graphql import GraphQLError, GraphQLSchema
from pydantic import BaseModel, ConfigDict, Field

from .application.forwarding_service import ForwardOperationEvents
from .interfaces.api_handlers import build_forwarder, config_path_from_env, schema_path_from_env
from .interfaces.sources import load_schema


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(None, alias="operationName")


def create_app(schema: GraphQLSchema, forwarder: ForwardOperationEvents | None = None) -> FastAPI:
    app = FastAPI(title="graphql-events API", version="0.1.0")
    service = forwarder or build_forwarder()

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""

        return {"status": "ok"}

    @app.post("/graphql")
    def graphql_endpoint(payload: GraphQLRequest, request: Request) -> dict[str, Any]:
        """Execute an operation and forward it as an event when policy allows."""

        try:
            result = service.execute(
                schema,
                payload.query,
                variable_values=payload.variables,
                operation_name=payload.operation_name,
                context_value={"headers": dict(request.headers)},
            )
        except GraphQLError as error:
            raise HTTPException(
                status_code=400,
                detail={"code": "invalid_query", "message": error.message},
            ) from error

        return result.formatted

    return app


def create_app_from_env() -> FastAPI:
    """App factory for ``uvicorn --factory`` driven by environment variables."""

    schema = load_schema(schema_path_from_env())
    return create_app(schema, build_forwarder(config_path_from_env()))
