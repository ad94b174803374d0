from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from .schemas import AnswerRequest
from .service import DrillManager

__all__ = ["create_drill_routers"]


def _not_found(exc: KeyError) -> HTTPException:
    message = exc.args[0] if exc.args else "not found"
    return HTTPException(404, str(message))


class _DrillController:
    def __init__(self, manager: DrillManager) -> None:
        self.manager = manager

    async def scenario(
        self,
        topic: str | None,
        street: str | None,
        difficulty: str,
        style: str,
        seed: int | None,
    ) -> JSONResponse:
        try:
            payload = await self.manager.new_scenario_async(
                topic=topic, street=street, difficulty=difficulty, style=style, seed=seed
            )
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return JSONResponse(payload.to_dict())

    async def answer(self, body: AnswerRequest) -> JSONResponse:
        try:
            result = await self.manager.submit_answer_async(body.scenario_id, body.answer_id)
        except KeyError as exc:
            raise _not_found(exc) from exc
        except ValueError as exc:
            raise HTTPException(400, str(exc)) from exc
        return JSONResponse(result.to_dict())

    async def stats(self) -> JSONResponse:
        return JSONResponse(self.manager.stats().to_dict())

    async def topics(self) -> JSONResponse:
        return JSONResponse({"topics": [topic.to_dict() for topic in self.manager.topics()]})


def create_drill_routers(manager: DrillManager) -> APIRouter:
    controller = _DrillController(manager)
    router = APIRouter(prefix="/api/v1/drill", tags=["drill"])

    @router.get("/scenario")
    async def get_scenario(
        topic: str | None = None,
        street: str | None = None,
        difficulty: str = "Beginner",
        style: str = "Simple",
        seed: int | None = None,
    ) -> JSONResponse:
        return await controller.scenario(topic, street, difficulty, style, seed)

    @router.post("/answer")
    async def post_answer(body: AnswerRequest) -> JSONResponse:
        return await controller.answer(body)

    @router.get("/stats")
    async def get_stats() -> JSONResponse:
        return await controller.stats()

    @router.get("/topics")
    async def get_topics() -> JSONResponse:
        return await controller.topics()

    return router
