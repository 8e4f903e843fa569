"""Design use cases."""

from .get_design import GetDesignRequest, GetDesignUseCase
from .get_top_designs import (
    GetTopDesignsRequest,
    GetTopDesignsResponse,
    GetTopDesignsUseCase,
)
from .list_designs import ListDesignsRequest, ListDesignsResponse, ListDesignsUseCase
from .submit_design import SubmitDesignRequest, SubmitDesignUseCase

__all__ = [
    "GetDesignRequest",
    "GetDesignUseCase",
    "GetTopDesignsRequest",
    "GetTopDesignsResponse",
    "GetTopDesignsUseCase",
    "ListDesignsRequest",
    "ListDesignsResponse",
    "ListDesignsUseCase",
    "SubmitDesignRequest",
    "SubmitDesignUseCase",
]
