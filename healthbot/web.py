from pathlib import Path
from typing import Optional
from fastapi import APIRouter, FastAPI, Form, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from healthbot.agent import ReportGenerator
from healthbot.errors import GenerationError, IntakeError
from healthbot.prompts import SUPPORTED_LANGUAGES
from healthbot.schemas import PatientIntake
from healthbot.service import analyze_intake
from healthbot.settings import Settings

BASE_DIR = Path(__file__).resolve().parent
SERVICE_FAILED_MESSAGE = "AI service failed. Try again."

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(
        request, "home.html", {"languages": SUPPORTED_LANGUAGES}
    )


@router.get("/health")
def health():
    return {"ok": True}


@router.post("/analyze", response_class=HTMLResponse)
def analyze(
    request: Request,
    name: str = Form(""),
    age: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    symptoms: str = Form(""),
    medical_history: Optional[str] = Form(None, alias="medicalHistory"),
    temperature: Optional[str] = Form(None),
    pulse: Optional[str] = Form(None),
    bp: Optional[str] = Form(None),
    weight: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
):
    intake = PatientIntake(
        name=name,
        age=age,
        gender=gender,
        contact=contact,
        symptoms=symptoms,
        medical_history=medical_history,
        temperature=temperature,
        pulse=pulse,
        bp=bp,
        weight=weight,
        language=language,
    )
    result = analyze_intake(intake, request.app.state.generator)
    return templates.TemplateResponse(request, "report.html", result.context())


def intake_error_handler(request: Request, exc: IntakeError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


def generation_error_handler(request: Request, exc: GenerationError):
    return PlainTextResponse(SERVICE_FAILED_MESSAGE, status_code=500)


def create_app(settings: Settings, generator=None) -> FastAPI:
    """Build the web app; pass a generator to bypass the OpenAI client."""
    app = FastAPI(title="HealthBot", version="0.1.0")
    app.state.generator = generator or ReportGenerator.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins) or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(IntakeError, intake_error_handler)
    app.add_exception_handler(GenerationError, generation_error_handler)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
    app.include_router(router)
    return app
