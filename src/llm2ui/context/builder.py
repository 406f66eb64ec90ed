"""
Context Builder
Assembles a UI generation prompt from a theme's docs, examples and colors
under a token budget.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..core import LRUCache, get_logger, get_settings, hash_fields, hash_object
from ..registry import ComponentDefinition
from ..schema import dump_schema
from ..themes import ThemeExample, ThemeManager, ThemePack
from .settings import COMPONENT_PRESETS, DEFAULT_CONTEXT_SETTINGS, ContextSettings
from .tokens import Language, TokenEstimate, estimate_tokens

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContextBreakdown:
    component_docs: int = 0
    examples: int = 0
    color_info: int = 0
    other: int = 0


@dataclass(frozen=True)
class ContextBuildResult:
    prompt: str
    token_count: int
    breakdown: ContextBreakdown
    optimized: bool
    within_budget: bool
    # Effective settings, after any optimization
    settings: ContextSettings


def select_components(theme: ThemePack, settings: ContextSettings) -> list[ComponentDefinition]:
    by_type = {definition.type: definition for definition in theme.components}
    selection = settings.components

    match selection.mode:
        case "selected":
            wanted = selection.selected_ids or ()
        case "preset":
            wanted = COMPONENT_PRESETS.get(selection.preset_name or "all", ())
            if not wanted:
                return list(theme.components)
        case _:
            return list(theme.components)

    return [by_type[name] for name in wanted if name in by_type]


def select_examples(theme: ThemePack, settings: ContextSettings) -> list[ThemeExample]:
    selection = settings.examples

    match selection.mode:
        case "none":
            return []
        case "selected":
            wanted = set(selection.selected_ids or ())
            return [example for example in theme.examples if example.id in wanted]
        case _:
            count = selection.max_count if selection.max_count is not None else get_settings().max_examples
            return list(theme.examples[:count])


def component_docs(components: list[ComponentDefinition]) -> str:
    lines = []
    for definition in components:
        line = f"- {definition.type}: {definition.description}" if definition.description else f"- {definition.type}"
        enums = [
            f"{prop}: {' | '.join(schema.enum)}"
            for prop, schema in definition.props_schema.items()
            if schema.enum
        ]
        if enums:
            line += f" ({'; '.join(enums)})"
        lines.append(line)
    return "\n".join(lines)


def example_docs(examples: list[ThemeExample]) -> str:
    return "\n\n".join(
        f"### {example.name}\n{example.description}\n```json\n{dump_schema(example.ui_schema, indent=2)}\n```"
        for example in examples
    )


def color_info(theme: ThemePack, settings: ContextSettings, heading: str) -> str:
    if not settings.color_scheme.include_in_prompt:
        return ""
    scheme = theme.get_color_scheme(settings.color_scheme.id)
    if scheme is None:
        return ""
    lines = [f"- {name}: {value}" for name, value in scheme.colors.items()]
    return f"{heading}: {scheme.name}\n" + "\n".join(lines)


class ContextBuilder:
    """
    Builds prompts for one theme manager.

    Results are cached per (theme, language, negative examples, settings);
    the cache is dropped whenever the manager's theme set changes.
    """

    def __init__(
        self,
        theme_manager: ThemeManager,
        language: Optional[Language] = None,
        include_negative_examples: Optional[bool] = None,
        cache_size: Optional[int] = None,
    ):
        settings = get_settings()
        self.theme_manager = theme_manager
        self.language: str = language or settings.language
        self.include_negative_examples = (
            include_negative_examples if include_negative_examples is not None else settings.include_negative_examples
        )
        self._cache: LRUCache[ContextBuildResult] = LRUCache(max_size=cache_size or settings.prompt_cache_size)
        self._revision = theme_manager.revision

    def set_language(self, language: Language) -> None:
        self.language = language

    def set_include_negative_examples(self, include: bool) -> None:
        self.include_negative_examples = include

    @property
    def cache_stats(self) -> dict:
        return self._cache.stats.to_dict()

    def clear_cache(self) -> None:
        self._cache.clear()

    def _sections(self, theme: ThemePack, settings: ContextSettings) -> tuple[str, str, str]:
        prompts = theme.prompts_for(self.language)
        heading = prompts.colors_heading if prompts else "## Color Scheme"
        return (
            component_docs(select_components(theme, settings)),
            example_docs(select_examples(theme, settings)),
            color_info(theme, settings, heading),
        )

    def estimate(self, settings: ContextSettings = DEFAULT_CONTEXT_SETTINGS) -> TokenEstimate:
        """Approximate token cost per section; see ``estimate_tokens``"""
        base = get_settings().base_prompt_tokens
        theme = self.theme_manager.get_theme(settings.theme_id)
        if theme is None:
            return TokenEstimate(0, 0, 0, base)

        docs, examples, colors = self._sections(theme, settings)
        return TokenEstimate(
            component_docs=estimate_tokens(docs, self.language),
            examples=estimate_tokens(examples, self.language),
            color_info=estimate_tokens(colors, self.language),
            base=base,
        )

    def build(self, settings: ContextSettings = DEFAULT_CONTEXT_SETTINGS) -> ContextBuildResult:
        """
        Assemble the prompt, shrinking it to fit the budget when
        ``token_budget.auto_optimize`` is set.
        """
        if self.theme_manager.revision != self._revision:
            self._cache.clear()
            self._revision = self.theme_manager.revision

        key = hash_fields(
            settings.theme_id,
            self.language,
            str(self.include_negative_examples),
            hash_object(settings.model_dump(mode="json")),
        )
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._build(settings)
        self._cache.set(key, result)
        return result

    def _build(self, settings: ContextSettings) -> ContextBuildResult:
        theme = self.theme_manager.get_theme(settings.theme_id)
        if theme is None:
            logger.warning("context_theme_not_found", theme_id=settings.theme_id)
            return ContextBuildResult("", 0, ContextBreakdown(), False, True, settings)

        budget = settings.token_budget.max
        estimate = self.estimate(settings)
        optimized = False

        if settings.token_budget.auto_optimize:
            while estimate.total > budget:
                reduced = self._reduce(theme, settings, estimate)
                if reduced is None:
                    break
                settings = reduced
                optimized = True
                estimate = self.estimate(settings)

            if optimized:
                logger.info(
                    "context_optimized",
                    theme_id=theme.id,
                    tokens=estimate.total,
                    budget=budget,
                    examples=len(select_examples(theme, settings)),
                    colors=settings.color_scheme.include_in_prompt,
                )

        return ContextBuildResult(
            prompt=self._assemble(theme, settings),
            token_count=estimate.total,
            breakdown=ContextBreakdown(
                component_docs=estimate.component_docs,
                examples=estimate.examples,
                color_info=estimate.color_info,
                other=estimate.base,
            ),
            optimized=optimized,
            within_budget=estimate.total <= budget,
            settings=settings,
        )

    def _reduce(
        self, theme: ThemePack, settings: ContextSettings, estimate: TokenEstimate
    ) -> Optional[ContextSettings]:
        """Next smaller settings: fewer examples first, then no colors"""
        examples = select_examples(theme, settings)
        floor = get_settings().min_examples
        count = len(examples)

        if estimate.examples > 0 and count > floor:
            per_example = estimate.examples / count
            reduction = math.ceil((estimate.total - settings.token_budget.max) / per_example)
            target = max(floor, count - max(1, reduction))
            if settings.examples.mode == "selected":
                keep = tuple(example.id for example in examples[:target])
                selection = settings.examples.model_copy(update={"selected_ids": keep})
            else:
                selection = settings.examples.model_copy(update={"max_count": target})
            return settings.model_copy(update={"examples": selection})

        if settings.color_scheme.include_in_prompt:
            scheme = settings.color_scheme.model_copy(update={"include_in_prompt": False})
            return settings.model_copy(update={"color_scheme": scheme})

        return None

    def _assemble(self, theme: ThemePack, settings: ContextSettings) -> str:
        prompts = theme.prompts_for(self.language)
        if prompts is None:
            logger.warning("context_prompts_missing", theme_id=theme.id, language=self.language)
            return ""

        docs, examples, colors = self._sections(theme, settings)
        parts = [prompts.system_intro, "", prompts.components_heading, docs, ""]
        if prompts.icon_guidelines:
            parts += [prompts.icon_guidelines, ""]
        if colors:
            parts += [colors, ""]
        if examples:
            parts += [prompts.examples_heading, examples, ""]
        if self.include_negative_examples and prompts.negative_examples:
            parts += [prompts.negative_heading, prompts.negative_examples, ""]
        parts.append(prompts.closing)
        return "\n".join(parts)
