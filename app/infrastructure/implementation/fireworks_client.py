import logging
from typing import Optional

from langchain_core.prompts import PromptTemplate
from langchain_fireworks import Fireworks

from app.core import config
from app.infrastructure.interfaces.completion_client import (
    CompletionUnavailableError,
    ICompletionClient,
)

logger = logging.getLogger(__name__)

COMPLETION_TEMPLATE = PromptTemplate.from_template(
    "{system_prompt}\n\n{user_prompt}\n"
)


class FireworksCompletionClient(ICompletionClient):
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        self.api_key = api_key if api_key is not None else config.API_KEY
        self.model = model or config.LLM_MODEL
        self.temperature = (
            temperature if temperature is not None else config.LLM_TEMPERATURE
        )
        self.max_tokens = max_tokens or config.LLM_MAX_TOKENS
        self.timeout = timeout or config.LLM_TIMEOUT_SECONDS
        self._llm: Optional[Fireworks] = None

        if not self.api_key:
            logger.error("API_KEY is not set; AI insights will use fallbacks")

    def _get_llm(self) -> Fireworks:
        if self._llm is None:
            if not self.api_key:
                raise CompletionUnavailableError("API_KEY is not configured")
            self._llm = Fireworks(
                api_key=self.api_key,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
            )
        return self._llm

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        llm = self._get_llm()
        prompt = COMPLETION_TEMPLATE.format(
            system_prompt=system_prompt.strip(), user_prompt=user_prompt
        )
        try:
            result = llm.invoke(prompt)
        except Exception as e:
            logger.error(f"Fireworks completion failed: {e}")
            raise CompletionUnavailableError(
                f"Completion request failed: {e}", original_error=e
            ) from e
        logger.info(f"Fireworks completion returned {len(result)} characters")
        return result
