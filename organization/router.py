from fastapi import APIRouter, Depends

from authz.deps import Actor, require_teammate

from .schema import OrganizationSchema

organization_router = APIRouter(prefix="/organizations", tags=["Organizations"])

# Get org by id (teammates only)
@organization_router.get("/{org_id}", response_model=OrganizationSchema)
def organization_detail(actor: Actor = Depends(require_teammate)):
    return actor.organization
