"""mittwald AI hosting provider adapter.

:class:`MittwaldProvider` is the host-facing surface. It composes the
model catalog resolver, the payload builder and the stream aggregator around
an ``openai`` SDK transport pointed at the mittwald endpoint.

Lifecycle
---------
- The endpoint is derived once per configuration load: the ``host``
  override when configured, else ``llm.aihosting.mittwald.de/v1``.
- The transport is created on first use. Failures while creating it surface
  as :class:`SetupFailureError` chained to the cause.
- The moderation flag is read from configuration on first client use and
  kept for the lifetime of the instance (or until reconfiguration).
- ``set_authentication`` and ``set_configuration`` drop the client so the
  next call rebuilds it.

Errors
------
Transport exceptions are logged with their ``error_code`` and routed through
:func:`raise_classified`: rate limit and quota failures become
``RateLimitError`` / ``QuotaExceededError``; anything else is re-raised
unchanged. Operations without an implementation raise
``NotImplementedOperationError`` before touching the transport.
"""

from __future__ import annotations

from typing import (
    Any,
    AsyncIterator,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    NoReturn,
    Optional,
    Union,
)

from ..base.cache import InMemoryCacheStore
from ..base.dto import AdapterParams
from ..base.errors import (
    ErrorCode,
    NotImplementedOperationError,
    SetupFailureError,
    classify_exception,
    raise_classified,
)
from ..base.interfaces import CacheStore, ChatTransport, CredentialResolver, Notifier
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatInput,
    ChatOutput,
    EmbeddingsInput,
    EmbeddingsOutput,
    ModelCapability,
    OperationType,
    StreamedChatChunk,
)
from ..base.repositories import KeysRepository
from ..base.streaming import StreamAggregator, StreamedChatOutput, aggregate_chunks_async
from ..config import get_provider_config
from ..config.defaults import (
    API_KEY_CONFIG_NAME,
    DEFAULT_CHAT_MODEL,
    DEFAULT_EMBEDDINGS_MODEL,
    INVALID_CREDENTIALS_MESSAGE,
    PROVIDER_NAME,
    QWEN3_EMBEDDING_8B_VECTOR_SIZE,
    SETUP_FAILURE_PREFIX,
)
from .catalog import ModelCatalogResolver
from .chat_helpers import chat_output_from_response, embeddings_output_from_response
from .endpoint import resolve_endpoint
from .payload import PayloadBuilder
from .rate_limit import LoggingNotifier, RateLimitProbe
from .stream_helpers import translate_chunk
from .transport import OpenAITransport

TransportFactory = Callable[[str, str], ChatTransport]

SUPPORTED_OPERATION_TYPES = (OperationType.CHAT, OperationType.EMBEDDINGS, OperationType.MODERATION)

_PARAM_FIELDS = frozenset(AdapterParams.model_fields)


def _default_transport_factory(api_key: str, base_url: str) -> ChatTransport:
    return OpenAITransport(api_key, base_url)


class MittwaldProvider:
    """Uniform, operation-typed access to the mittwald AI hosting API.

    Args:
        params: Adapter settings; loaded through :func:`get_provider_config`
            when omitted.
        credentials: Resolves the configured key identifier to the secret.
        cache: Store for resolved model catalogs.
        notifier: Receives user-facing warnings from :meth:`post_setup`.
        transport_factory: ``(api_key, base_url) -> ChatTransport``.
        rate_limit_probe: Probe used by :meth:`post_setup`.
    """

    def __init__(
        self,
        params: Optional[AdapterParams] = None,
        *,
        credentials: Optional[CredentialResolver] = None,
        cache: Optional[CacheStore] = None,
        notifier: Optional[Notifier] = None,
        transport_factory: Optional[TransportFactory] = None,
        rate_limit_probe: Optional[RateLimitProbe] = None,
    ) -> None:
        self._params = params or AdapterParams(**get_provider_config(PROVIDER_NAME))
        self._credentials = credentials or KeysRepository()
        self._cache = cache or InMemoryCacheStore()
        self._notifier = notifier or LoggingNotifier()
        self._transport_factory = transport_factory or _default_transport_factory
        self._probe = rate_limit_probe
        self._builder = PayloadBuilder(self._params.options, self._params.system_message)
        self._logger = get_logger("mittwald.client")

        self._api_key: Optional[str] = None
        self._endpoint: Optional[str] = None
        self._moderation: Optional[bool] = None
        self._transport: Optional[ChatTransport] = None
        self._catalog: Optional[ModelCatalogResolver] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def params(self) -> AdapterParams:
        return self._params

    @property
    def endpoint(self) -> str:
        """API base URL, derived once per configuration load."""
        if self._endpoint is None:
            self._endpoint = resolve_endpoint(self._params.host)
        return self._endpoint

    @property
    def moderation_enabled(self) -> Optional[bool]:
        """Moderation flag; ``None`` until the client has been used."""
        return self._moderation

    def _load_api_key(self) -> Optional[str]:
        return self._api_key or self._credentials.resolve(self._params.api_key)

    def _reset_client(self) -> None:
        self._endpoint = None
        self._moderation = None
        self._transport = None
        self._catalog = None

    def _ensure_client(self) -> ChatTransport:
        if self._moderation is None:
            self._moderation = self._params.moderation
        if self._transport is not None:
            return self._transport
        ctx = LogContext(operation="setup")
        api_key = self._load_api_key()
        try:
            if not api_key:
                raise ValueError(f"no API key found for identifier {self._params.api_key!r}")
            transport = self._transport_factory(api_key, self.endpoint)
        except Exception as exc:
            normalized_log_event(
                self._logger,
                "setup.error",
                ctx,
                phase="setup",
                error_code=ErrorCode.SETUP_FAILURE.value,
                emitted=False,
                endpoint=self.endpoint,
                error=str(exc),
            )
            raise SetupFailureError(message=SETUP_FAILURE_PREFIX + str(exc), raw=exc) from exc
        self._transport = transport
        self._catalog = ModelCatalogResolver(transport, self._cache)
        return transport

    def _raise_transport_error(self, exc: Exception, ctx: LogContext, event: str) -> NoReturn:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="error",
            error_code=classify_exception(exc).value,
            emitted=False,
            error=str(exc),
        )
        raise_classified(exc, provider=PROVIDER_NAME, model=ctx.model)

    def _not_implemented(self, operation: OperationType, model_id: Optional[str]) -> NoReturn:
        raise NotImplementedOperationError(message=f"{operation.value} is not implemented", model=model_id)

    # ------------------------------------------------------------------
    # Host configuration
    # ------------------------------------------------------------------

    def set_authentication(self, api_key: str) -> None:
        """Use ``api_key`` directly instead of resolving the configured identifier."""
        self._api_key = api_key
        self._reset_client()

    def set_configuration(self, configuration: Mapping[str, Any]) -> None:
        """Apply configuration at runtime.

        Keys naming adapter settings (``host``, ``api_key``, ``moderation``,
        ``system_message``, ``options``) replace those settings; any other key
        becomes a base payload option. The derived endpoint and the client are
        reset. A system role set through :meth:`set_chat_system_role` is kept
        unless ``system_message`` is part of ``configuration``.
        """
        settings = self._params.model_dump()
        options = dict(settings.get("options") or {})
        for key, value in configuration.items():
            if key == "options" and isinstance(value, Mapping):
                options.update(value)
            elif key in _PARAM_FIELDS:
                settings[key] = value
            else:
                options[key] = value
        settings["options"] = options
        self._params = AdapterParams(**settings)
        system_role = self._params.system_message if "system_message" in configuration else self._builder.system_role
        self._builder = PayloadBuilder(self._params.options, system_role)
        self._reset_client()

    def set_chat_system_role(self, text: Optional[str]) -> None:
        """Set the system prompt prepended to chat conversations."""
        self._builder.system_role = text or None

    # ------------------------------------------------------------------
    # Catalog & metadata
    # ------------------------------------------------------------------

    def get_configured_models(
        self,
        operation_type: Union[OperationType, str, None] = None,
        capabilities: Iterable[Union[ModelCapability, str]] = (),
    ) -> List[str]:
        """Return model ids usable for ``operation_type`` with every capability.

        An unknown (or missing) operation type yields an empty list.
        """
        self._ensure_client()
        assert self._catalog is not None  # nosec B101 - set by _ensure_client
        try:
            op = OperationType(operation_type) if operation_type is not None else None
        except ValueError:
            op = None
        if op is None:
            return []
        return self._catalog.resolve(op, capabilities)

    def get_supported_operation_types(self) -> List[OperationType]:
        return list(SUPPORTED_OPERATION_TYPES)

    def get_model_settings(self, model_id: str, general_config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._builder.get_model_settings(model_id, general_config)

    @staticmethod
    def embeddings_vector_size(model_id: str) -> int:
        """Return the embedding width for known models, ``0`` when unknown."""
        return QWEN3_EMBEDDING_8B_VECTOR_SIZE if model_id.lower() == DEFAULT_EMBEDDINGS_MODEL.lower() else 0

    @staticmethod
    def get_setup_data() -> Dict[str, Any]:
        """Static defaults hosts use to pre-populate their configuration."""
        return {
            "key_config_name": API_KEY_CONFIG_NAME,
            "default_models": {
                "chat": DEFAULT_CHAT_MODEL,
                "chat_with_image_vision": DEFAULT_CHAT_MODEL,
                "chat_with_complex_json": DEFAULT_CHAT_MODEL,
                "chat_with_tools": DEFAULT_CHAT_MODEL,
                "chat_with_structured_response": DEFAULT_CHAT_MODEL,
                "embeddings": DEFAULT_EMBEDDINGS_MODEL,
            },
        }

    def post_setup(self) -> Optional[str]:
        """Run the rate limit probe and forward its warning to the notifier.

        Returns:
            The warning text, or ``None`` when the account looks unrestricted.

        Raises:
            SetupFailureError: When no API key can be resolved.
        """
        api_key = self._load_api_key()
        if not api_key:
            raise SetupFailureError(
                message=f"{SETUP_FAILURE_PREFIX}no API key found for identifier {self._params.api_key!r}"
            )
        probe = self._probe or RateLimitProbe(host=self._params.host)
        warning = probe.check(api_key)
        if warning:
            self._notifier.warning(warning)
        return warning

    def validate_credentials(self) -> Optional[str]:
        """Check that the credential works by listing chat models.

        Returns:
            ``None`` on success, otherwise a user-facing error message.
        """
        try:
            self.get_configured_models(OperationType.CHAT)
        except Exception as exc:
            normalized_log_event(
                self._logger,
                "setup.validate.error",
                LogContext(operation="setup"),
                phase="setup",
                error_code=classify_exception(exc).value,
                emitted=False,
                error=str(exc),
            )
            return INVALID_CREDENTIALS_MESSAGE
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def chat(
        self,
        input: Union[ChatInput, str],
        model_id: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Union[ChatOutput, StreamedChatOutput]:
        """Run a chat completion.

        ``options["stream"]`` selects streaming, in which case a lazily
        consumable :class:`StreamedChatOutput` is returned and the vendor call
        happens on first iteration. Other options are merged over the
        configured base options.
        """
        call_options = dict(options or {})
        stream = bool(call_options.pop("stream", False))
        payload = self._builder.build(OperationType.CHAT, model_id, input, call_options, stream=stream)
        transport = self._ensure_client()
        ctx = LogContext(model=model_id, operation=OperationType.CHAT.value)

        if stream:
            tools = input.tools if isinstance(input, ChatInput) else ()
            aggregator = StreamAggregator(tools)
            return StreamedChatOutput(self._stream_chunks(transport, payload, ctx, aggregator), aggregator)

        normalized_log_event(self._logger, "chat.start", ctx, phase="start", emitted=False)
        try:
            response = transport.create_chat_completion(payload)
        except Exception as exc:
            self._raise_transport_error(exc, ctx, "chat.error")
        output = chat_output_from_response(response, input)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=output.usage,
            finish_reason=output.finish_reason,
        )
        return output

    def _stream_chunks(
        self,
        transport: ChatTransport,
        payload: Dict[str, Any],
        ctx: LogContext,
        aggregator: StreamAggregator,
    ) -> Iterator[StreamedChatChunk]:
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", emitted=False)
        count = 0
        try:
            for raw in transport.create_chat_completion_streamed(payload):
                count += 1
                yield translate_chunk(raw)
        except Exception as exc:
            self._raise_transport_error(exc, ctx, "chat.error")
        result = aggregator.result
        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=count > 0,
            tokens=result.usage,
            finish_reason=result.finish_reason,
            chunks=count,
        )

    async def _stream_chunks_async(
        self, transport: ChatTransport, payload: Dict[str, Any], ctx: LogContext
    ) -> AsyncIterator[StreamedChatChunk]:
        try:
            async for raw in transport.create_chat_completion_streamed_async(payload):
                yield translate_chunk(raw)
        except Exception as exc:
            self._raise_transport_error(exc, ctx, "chat.error")

    async def chat_async(
        self,
        input: Union[ChatInput, str],
        model_id: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> ChatOutput:
        """Run a streamed chat completion to completion and return the aggregate.

        The vendor call is always streamed so usage arrives with the final
        chunk; the result is the materialized :class:`ChatOutput`.
        """
        call_options = dict(options or {})
        call_options.pop("stream", None)
        payload = self._builder.build(OperationType.CHAT, model_id, input, call_options, stream=True)
        transport = self._ensure_client()
        ctx = LogContext(model=model_id, operation=OperationType.CHAT.value)
        tools = input.tools if isinstance(input, ChatInput) else ()

        normalized_log_event(self._logger, "stream.start", ctx, phase="start", emitted=False, mode="async")
        output = await aggregate_chunks_async(self._stream_chunks_async(transport, payload, ctx), StreamAggregator(tools))
        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=output.usage,
            finish_reason=output.finish_reason,
            mode="async",
        )
        return output

    def embeddings(
        self,
        input: Union[EmbeddingsInput, str],
        model_id: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> EmbeddingsOutput:
        """Embed ``input`` and return the float vector with usage."""
        payload = self._builder.build(OperationType.EMBEDDINGS, model_id, input, options)
        transport = self._ensure_client()
        ctx = LogContext(model=model_id, operation=OperationType.EMBEDDINGS.value)
        normalized_log_event(self._logger, "embeddings.start", ctx, phase="start", emitted=False)
        try:
            response = transport.create_embedding(payload)
        except Exception as exc:
            self._raise_transport_error(exc, ctx, "embeddings.error")
        output = embeddings_output_from_response(response)
        normalized_log_event(
            self._logger,
            "embeddings.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=output.usage,
            dimensions=len(output.vector),
        )
        return output

    def moderation(self, input: Any, model_id: Optional[str] = None, options: Optional[Mapping[str, Any]] = None) -> NoReturn:
        self._not_implemented(OperationType.MODERATION, model_id)

    def text_to_image(self, input: Any, model_id: str, options: Optional[Mapping[str, Any]] = None) -> NoReturn:
        self._not_implemented(OperationType.TEXT_TO_IMAGE, model_id)

    def text_to_speech(self, input: Any, model_id: str, options: Optional[Mapping[str, Any]] = None) -> NoReturn:
        self._not_implemented(OperationType.TEXT_TO_SPEECH, model_id)

    def speech_to_text(self, input: Any, model_id: str, options: Optional[Mapping[str, Any]] = None) -> NoReturn:
        self._not_implemented(OperationType.SPEECH_TO_TEXT, model_id)


__all__ = ["MittwaldProvider", "SUPPORTED_OPERATION_TYPES", "TransportFactory"]
