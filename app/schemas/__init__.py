from .generation import ContentGenerationRequest, CONTENT_TYPES, parse_generation_request, FlowchartRequest, ImproveResumeRequest
from .generated import GENERATED_MODELS, FlowchartGraph, ParsedResume, ResumeAnalysisResult
from .template import TemplateManifest, TemplateRegistry, TemplateRegistryEntry
from .portfolio import PortfolioData, PortfolioDownloadRequest
from .content import ApiResponse

__all__ = [
	"ContentGenerationRequest",
	"CONTENT_TYPES",
	"parse_generation_request",
	"FlowchartRequest",
	"ImproveResumeRequest",
	"GENERATED_MODELS",
	"FlowchartGraph",
	"ParsedResume",
	"ResumeAnalysisResult",
	"TemplateManifest",
	"TemplateRegistry",
	"TemplateRegistryEntry",
	"PortfolioData",
	"PortfolioDownloadRequest",
	"ApiResponse",
]
