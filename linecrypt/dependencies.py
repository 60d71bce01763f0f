from typing import Annotated

from fastapi import Depends

from linecrypt.core.config import Settings, get_settings
from linecrypt.services.pipeline.pipeline import CipherPipeline, get_pipeline


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Pipeline dependency
PipelineDep = Annotated[CipherPipeline, Depends(get_pipeline)]
