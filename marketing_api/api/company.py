"""Company information route (public)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from marketing_api.core.store import DataStore, get_store
from marketing_api.schemas.stats import CompanyResponse

router = APIRouter()


@router.get("", response_model=CompanyResponse)
def get_company(
    store: Annotated[DataStore, Depends(get_store)],
) -> CompanyResponse:
    return CompanyResponse(data=store.get_company_info())
