import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paycycle import __version__
from paycycle.core.config import settings
from paycycle.api.v1.pay_periods import router as pay_periods_router
from paycycle.api.v1.timesheet import router as timesheet_router
from paycycle.api.v1.payroll import router as payroll_router
from paycycle.api.v1.earnings import router as earnings_router
from paycycle.api.v1.calendar import router as calendar_router, holidays_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(
    title="Paycycle API",
    description="Pay periods, timesheet totals, payroll and YTD earnings",
    version=__version__,
    # Swagger UI only in development
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"

app.include_router(pay_periods_router, prefix=API_PREFIX)
app.include_router(timesheet_router, prefix=API_PREFIX)
app.include_router(payroll_router, prefix=API_PREFIX)
app.include_router(earnings_router, prefix=API_PREFIX)
app.include_router(holidays_router, prefix=API_PREFIX)
app.include_router(calendar_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Paycycle API", "version": __version__}
