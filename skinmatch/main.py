from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from .analyzer import SkinAnalysisService
from .config import get_settings
from .exceptions import InvalidImageError, NotFoundError, VisionProviderError
from .gemini_client import GeminiClient
from .models import Analysis, AnalyzeRequest, Product
from .storage import MemStorage


def build_service() -> SkinAnalysisService:
    settings = get_settings()
    return SkinAnalysisService(
        storage=MemStorage(),
        vision_client=GeminiClient(settings.gemini_api_key, settings.gemini_model),
        weights=settings.weights,
    )


def get_service(request: Request) -> SkinAnalysisService:
    return request.app.state.service


def create_app(service: Optional[SkinAnalysisService] = None) -> FastAPI:
    app = FastAPI(
        title="AI-Powered Skin Analysis & Product Recommendations",
        description="Analyze a facial photo and get skincare products ranked for it",
        version="1.0.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = service or build_service()

    @app.get("/")
    async def root():
        return {"message": "AI-Powered Skin Analysis & Product Recommendations API"}

    @app.get("/api/products", response_model=List[Product])
    async def list_products(service: SkinAnalysisService = Depends(get_service)):
        return service.list_products()

    @app.get("/api/products/{product_id}", response_model=Product)
    async def get_product(product_id: int, service: SkinAnalysisService = Depends(get_service)):
        try:
            return service.get_product(product_id)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/api/analyze", response_model=Analysis)
    async def analyze(request: AnalyzeRequest, service: SkinAnalysisService = Depends(get_service)):
        """
        Analyze a facial photo.

        - **image**: base64 encoded JPEG or PNG, optionally as a data URL

        Returns the stored analysis: skin type, concerns, facial features and
        product recommendations with suggested ingredients.
        """
        try:
            return await run_in_threadpool(service.analyze_image, request.image)
        except InvalidImageError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except VisionProviderError as e:
            raise HTTPException(status_code=502, detail=str(e))
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    @app.get("/api/analyses", response_model=List[Analysis])
    async def list_analyses(service: SkinAnalysisService = Depends(get_service)):
        return service.list_analyses()

    @app.get("/api/analysis/{analysis_id}", response_model=Analysis)
    async def get_analysis(analysis_id: int, service: SkinAnalysisService = Depends(get_service)):
        try:
            return service.get_analysis(analysis_id)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.get("/api/analysis/{analysis_id}/recommendations", response_model=List[Product])
    async def get_recommendations(analysis_id: int, service: SkinAnalysisService = Depends(get_service)):
        """Up to four catalog products ranked for the analysis, each with its matchScore."""
        try:
            return service.get_recommendations(analysis_id)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
