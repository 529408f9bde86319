from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.api import cart, appointments, contact
from app.core.logger import setup_logging, logger
from app.services.store import build_stores
from app.services.validation import RecordValidationError
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 Starting {settings.PROJECT_NAME} on port {settings.PORT}")
    yield
    # Shutdown (in-memory data is discarded with the process)
    logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

# Empty stores, owned by this app instance
app.state.stores = build_stores()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RecordValidationError)
async def record_validation_handler(request: Request, exc: RecordValidationError):
    logger.warning(f"⚠️ {request.method} {request.url.path} rejected, missing: {', '.join(exc.missing)}")
    return JSONResponse(status_code=400, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # loc is ("body", <field>) for field errors, ("body", <offset>) for broken JSON
    fields = sorted({
        err["loc"][-1] for err in exc.errors()
        if len(err.get("loc", ())) > 1 and isinstance(err["loc"][-1], str)
    })
    if fields:
        message = f"Invalid value for field(s): {', '.join(fields)}."
    else:
        message = "Invalid request body."
    logger.warning(f"⚠️ {request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "detail": "An unexpected error occurred. Please contact support."}
    )

# Include routers
app.include_router(cart.router, prefix=settings.API_PREFIX, tags=["Cart"])
app.include_router(appointments.router, prefix=settings.API_PREFIX, tags=["Appointments"])
app.include_router(contact.router, prefix=settings.API_PREFIX, tags=["Contact"])

@app.get("/")
async def health_check():
    return {'status': 'active', 'time': datetime.now().isoformat()}

@app.get("/health")
async def health_check_std(request: Request):
    stores = request.app.state.stores
    return {
        "status": "ok",
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now().isoformat(),
        "counts": {
            "cart": len(stores.cart),
            "appointments": len(stores.appointments),
            "contactMessages": len(stores.contact_messages),
        },
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.ENVIRONMENT == "development")
