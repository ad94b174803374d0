from __future__ import annotations

import os

from fastapi import FastAPI

from ..features.drill import DrillManager, DrillServiceConfig, create_drill_routers

__all__ = ["app", "create_app", "main"]


def create_app(manager: DrillManager | None = None) -> FastAPI:
    application = FastAPI(title="Poker Drill Trainer")
    drill_manager = manager or DrillManager(DrillServiceConfig.from_env())
    application.state.drill_manager = drill_manager

    @application.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    application.include_router(create_drill_routers(drill_manager))
    return application


app = create_app()


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    host = os.environ.get("BIND", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
