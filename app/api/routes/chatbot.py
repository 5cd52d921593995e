"""
Chatbot API Endpoints
"""
from fastapi import APIRouter

router = APIRouter(tags=["Chatbot"])


@router.get("")
def chatbot_index():
    return {"success": True, "module": "chatbot"}
