from .description_tool import DescriptionTool, LLMDescriptionTool
from .reverse_image_tool import ReverseImageSearchTool, GoogleReverseImageSearchTool
from .vision_label_tool import VisionLabelTool, GoogleVisionLabelTool

__all__ = [
    "DescriptionTool",
    "LLMDescriptionTool",
    "ReverseImageSearchTool",
    "GoogleReverseImageSearchTool",
    "VisionLabelTool",
    "GoogleVisionLabelTool",
]
