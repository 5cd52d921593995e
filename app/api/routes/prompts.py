from fastapi import APIRouter

router = APIRouter(tags=["Prompts"])


@router.get("")
def prompts_index():
    return {"success": True, "module": "prompts"}
