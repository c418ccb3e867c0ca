from fastapi import APIRouter, Depends
from packpal.modules.auth.schemas import CurrentUserResponse, CapabilityMatrixResponse
from packpal.core.dependencies import get_current_user
from packpal.config.permissions_config import CAPABILITY_MATRIX
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: Dict = Depends(get_current_user)):
    """Get current authenticated user"""
    return current_user


@router.get("/capabilities", response_model=CapabilityMatrixResponse)
async def get_capabilities(current_user: Dict = Depends(get_current_user)):
    """Capability matrix of the event roles (for frontend UI)"""
    return CAPABILITY_MATRIX
