import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from laundry.api.v1.checkout import router as checkout_router
from laundry.api.v1.orders import router as orders_router
from laundry.core.config import settings
from laundry.wiring.dependencies import close_order_gateway


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "order_id", "item", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_order_gateway()


app = FastAPI(title="Laundry Order Engine", version="1.0.0", lifespan=lifespan)

app.include_router(checkout_router, prefix="/api/v1", tags=["checkout"])
app.include_router(orders_router, prefix="/api/v1", tags=["orders"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
