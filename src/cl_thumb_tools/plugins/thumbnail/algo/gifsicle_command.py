"""gifsicle argument builder for the frame-preserving pipeline."""

import re

from loguru import logger

from ..schema import TransformPlan

RESIZE_COLORS = 64


def build_gifsicle_arguments(plan: TransformPlan) -> list[str]:
    """
    Translate a plan into gifsicle transformation arguments.

    The source and destination arguments are left to the executor.
    A crop is applied first; a cropped image is resized to the exact box,
    an uncropped one is only fitted within it.
    """
    arguments: list[str] = ["-O2", "--conserve-memory"]

    if plan.crop_rect is not None:
        arguments += ["--crop", plan.crop_rect.to_gifsicle()]

    if plan.scale_token:
        thumb_scale = re.sub(r"\W", "", plan.scale_token)
        arguments += ["--resize-colors", str(RESIZE_COLORS)]
        arguments += ["--resize" if plan.crop_rect is not None else "--resize-fit", thumb_scale]

    logger.debug(f"gifsicle transformation: {' '.join(arguments)}")
    return arguments
