# app/routers/hello.py

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.common.deps import get_greeting_service
from app.models.greeting import GreetResponse
from app.services.greeting_service import GreetingService

router = APIRouter(prefix="/hello", tags=["hello"])

@router.get("", response_class=PlainTextResponse)
async def handle_hello(service: GreetingService = Depends(get_greeting_service)):
    return service.hello_world()

@router.get("/{name}", response_class=PlainTextResponse)
async def greet_user(name: str, service: GreetingService = Depends(get_greeting_service)):
    return service.greet(name)

# Same path, JSON body
@router.post("/{name}", response_model=GreetResponse)
async def greet_user_json(name: str, service: GreetingService = Depends(get_greeting_service)):
    return service.greet_json(name)
