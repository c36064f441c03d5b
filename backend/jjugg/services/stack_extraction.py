"""
Tech stack extraction service.

Turns a pasted job description into a short list of canonical technology
names. The LLM is the only source of raw candidates: when it is not
configured or its call fails, the failure is reported instead of being
replaced by keyword matching.

Flow:
    validate input → check provider → prompt LLM → parse response → normalize

Example:
    service = StackExtractionService(llm=get_llm(0.1, 300), model_name="llama-3.1-8b-instant")
    result = await service.extract("We need a React + Node.js engineer...")
    result.to_payload()  # {"stack": ["React", "Node.js"], "aiUsed": True}
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import ValidationError

from jjugg.core.exceptions import (
    InvalidInputError,
    ProviderCallFailedError,
    ProviderUnavailableError,
    StackServiceError,
)
from jjugg.core.logging import ExtractionLogger
from jjugg.schemas import ExtractionRequest, ExtractionResult
from jjugg_skills.tech_stack_normalizer import (
    NormalizerLimits,
    TechStackNormalizer,
    parse_candidate_list,
)

SYSTEM_PROMPT = (
    "You extract a concise tech stack from job descriptions.\n"
    "Return ONLY a JSON array of distinct technology/tool names (strings). No extra text."
)

USER_PROMPT_TEMPLATE = (
    "Job Description:\n\n{job_description}\n\n"
    'Return a JSON array of strings, e.g.: ["React", "Next.js", "TypeScript"].'
)


@runtime_checkable
class LLMProtocol(Protocol):
    """
    Interface for chat-completion providers.

    ChatGroq satisfies it, and so does an AsyncMock in tests. Temperature
    and the output token limit are bound when the client is built.
    """

    async def ainvoke(self, messages: List[BaseMessage]) -> Any:
        ...


def build_messages(job_description: str) -> List[BaseMessage]:
    """System instruction plus the job description with an output example."""
    return [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(content=USER_PROMPT_TEMPLATE.format(job_description=job_description)),
    ]


def _response_text(response: Any) -> str:
    content = getattr(response, "content", None)
    if isinstance(content, list):
        # Mensajes multi-parte: solo interesan los bloques de texto
        content = "".join(
            part if isinstance(part, str) else str(part.get("text", ""))
            for part in content
            if isinstance(part, (str, dict))
        )
    text = content.strip() if isinstance(content, str) else ""
    return text or "[]"


class StackExtractionService:
    """
    Stateless extractor: one provider call per request, no retries.

    Attributes:
        llm: Chat model, or None when no provider is configured.
        model_name: Model label used in logs and errors.
        normalizer: Canonicalizer applied to the parsed candidates.
    """

    def __init__(
        self,
        llm: Optional[LLMProtocol],
        model_name: Optional[str] = None,
        limits: Optional[NormalizerLimits] = None,
        logger: Optional[ExtractionLogger] = None,
    ) -> None:
        self.llm = llm
        self.model_name = model_name
        self.normalizer = TechStackNormalizer(limits)
        self.logger = logger or ExtractionLogger("extraction")

    async def extract(self, job_description: Any) -> ExtractionResult:
        """
        Extract the canonical tech stack of a job description.

        Never raises for the three known failure kinds; they come back as
        an ExtractionResult with ``error`` set and ``ai_used`` False.
        """
        try:
            stack = await self._run(job_description)
        except StackServiceError as e:
            self.logger.extraction_failed(e.code, e)
            return ExtractionResult.failure(e.code)
        return ExtractionResult.success(stack)

    async def _run(self, job_description: Any) -> List[str]:
        text = self._validate(job_description)

        if self.llm is None:
            raise ProviderUnavailableError()

        self.logger.extraction_start(text)
        raw_text = await self._invoke(text)

        parsed = parse_candidate_list(raw_text)
        self.logger.parse_outcome(parsed.source.value, len(parsed.items))

        stack = self.normalizer.normalize(parsed.items)
        self.logger.extraction_end(stack)
        return stack

    @staticmethod
    def _validate(job_description: Any) -> str:
        try:
            request = ExtractionRequest(job_description=job_description)
        except ValidationError as e:
            raise InvalidInputError(received_type=type(job_description).__name__) from e
        return request.job_description

    async def _invoke(self, job_description: str) -> str:
        self.logger.provider_call(self.model_name)
        try:
            response = await self.llm.ainvoke(build_messages(job_description))
        except Exception as e:
            raise ProviderCallFailedError(
                "Chat completion failed",
                model_name=self.model_name,
                details=type(e).__name__,
            ) from e
        return _response_text(response)
