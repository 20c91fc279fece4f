from querystudio.query.schemas import QueryResult, QueryResultShapeError

__all__ = ["QueryResult", "QueryResultShapeError"]
