from healthbot.handlers.analysis import router as analysis_router
from healthbot.handlers.help import router as help_router

ALL_ROUTERS = [
    help_router,
    analysis_router,
]
