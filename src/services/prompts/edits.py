"""Photo editing instruction templates.

Contains prompts for:
- LOCALIZED_EDIT: Edit around a hotspot, rest of the image untouched
- STYLE_FILTER: Global stylistic filter that keeps composition
- GLOBAL_ADJUSTMENT: Global photorealistic adjustment
- BACKGROUND_REMOVAL: Subject cut-out on a transparent background

The wording (including the skin-tone / ethnicity policy) is sent to the model
verbatim and must not be paraphrased.
"""

from typing import Callable, Optional

from models.image_edit import EditAction, Hotspot


class InstructionError(ValueError):
    """Raised when an instruction cannot be rendered for a request."""

    pass


class InvalidActionError(InstructionError):
    """Raised for an action outside of EditAction."""

    def __init__(self, action: str):
        self.action = action
        super().__init__("Invalid action")


class MissingParameterError(InstructionError):
    """Raised when an action is missing a required parameter."""

    def __init__(self, action: EditAction, parameters: tuple[str, ...]):
        self.action = action
        self.parameters = parameters
        quoted = " and ".join(f'"{name}"' for name in parameters)
        noun = "Parameters" if len(parameters) > 1 else "Parameter"
        verb = "are" if len(parameters) > 1 else "is"
        super().__init__(f"{noun} {quoted} {verb} required for {action.value}")


# Localized Edit prompt
# Template placeholders: {prompt}, {x}, {y}
LOCALIZED_EDIT = """Você é uma IA especialista em edição de fotos. Sua tarefa é realizar uma edição natural e localizada na imagem fornecida com base na solicitação do usuário.
Solicitação do Usuário: "{prompt}"
Local da Edição: Foque na área ao redor das coordenadas de pixel (x: {x}, y: {y}).
Diretrizes de Edição: A edição deve ser realista e se mesclar perfeitamente com a área ao redor. O restante da imagem deve permanecer idêntico ao original.
Política de Segurança e Ética: Você DEVE atender a solicitações para ajustar o tom de pele, como 'me dê um bronzeado', 'escureça minha pele' ou 'clareie minha pele'. Essas são consideradas melhorias fotográficas padrão. Você DEVE RECUSAR qualquer solicitação para alterar a raça ou etnia fundamental de uma pessoa.
Saída: Retorne APENAS a imagem final editada. Não retorne texto."""


# Style Filter prompt
# Template placeholders: {prompt}
STYLE_FILTER = """Você é uma IA especialista em edição de fotos. Sua tarefa é aplicar um filtro estilístico a toda a imagem com base na solicitação do usuário. Não altere a composição ou o conteúdo, apenas aplique o estilo.
Solicitação de Filtro: "{prompt}"
Política de Segurança e Ética: Filtros podem alterar sutilmente as cores, mas você DEVE garantir que eles não alterem a raça ou etnia fundamental de uma pessoa. Você DEVE RECUSAR qualquer solicitação que peça explicitamente para mudar a raça de uma pessoa.
Saída: Retorne APENAS a imagem final com o filtro aplicado. Não retorne texto."""


# Global Adjustment prompt
# Template placeholders: {prompt}
GLOBAL_ADJUSTMENT = """Você é uma IA especialista em edição de fotos. Sua tarefa é realizar um ajuste natural e global em toda a imagem com base na solicitação do usuário.
Solicitação do Usuário: "{prompt}"
Diretrizes de Edição: O ajuste deve ser aplicado em toda a imagem. O resultado deve ser fotorrealista.
Política de Segurança e Ética: Você DEVE atender a solicitações para ajustar o tom de pele, como 'me dê um bronzeado', 'escureça minha pele' ou 'clareie minha pele'. Essas são consideradas melhorias fotográficas padrão. Você DEVE RECUSAR qualquer solicitação para alterar a raça ou etnia fundamental de uma pessoa.
Saída: Retorne APENAS a imagem final ajustada. Não retorne texto."""


# Background Removal prompt
# No placeholders
BACKGROUND_REMOVAL = """Você é uma IA especialista em edição de fotos. Sua tarefa é identificar com precisão o(s) objeto(s) principal(is) na imagem e remover completamente o fundo, tornando-o transparente.
A saída DEVE ser uma imagem PNG com um canal alfa transparente. Não adicione nenhum novo fundo ou cor.
Retorne APENAS a imagem final editada com um fundo transparente."""


def build_localized_edit(prompt: Optional[str], hotspot: Optional[Hotspot]) -> str:
    """Render the localized edit instruction."""
    if not prompt or hotspot is None:
        raise MissingParameterError(EditAction.EDIT, ("prompt", "hotspot"))
    return LOCALIZED_EDIT.format(prompt=prompt, x=hotspot.x, y=hotspot.y)


def build_style_filter(prompt: Optional[str], hotspot: Optional[Hotspot] = None) -> str:
    """Render the style filter instruction."""
    if not prompt:
        raise MissingParameterError(EditAction.FILTER, ("prompt",))
    return STYLE_FILTER.format(prompt=prompt)


def build_global_adjustment(prompt: Optional[str], hotspot: Optional[Hotspot] = None) -> str:
    """Render the global adjustment instruction."""
    if not prompt:
        raise MissingParameterError(EditAction.ADJUST, ("prompt",))
    return GLOBAL_ADJUSTMENT.format(prompt=prompt)


def build_background_removal(
    prompt: Optional[str] = None, hotspot: Optional[Hotspot] = None
) -> str:
    """Render the background removal instruction (takes no user input)."""
    return BACKGROUND_REMOVAL


INSTRUCTION_BUILDERS: dict[EditAction, Callable[[Optional[str], Optional[Hotspot]], str]] = {
    EditAction.EDIT: build_localized_edit,
    EditAction.FILTER: build_style_filter,
    EditAction.ADJUST: build_global_adjustment,
    EditAction.REMOVE_BACKGROUND: build_background_removal,
}


def parse_action(action: str) -> EditAction:
    """Map a raw action string onto EditAction.

    Raises:
        InvalidActionError: If the action is not one of the supported values
    """
    try:
        return EditAction(action)
    except ValueError:
        raise InvalidActionError(action)


def build_instruction(
    action: EditAction,
    prompt: Optional[str] = None,
    hotspot: Optional[Hotspot] = None,
) -> str:
    """Render the instruction text for an action.

    Args:
        action: Requested edit action
        prompt: User request text (required for edit, filter, adjust)
        hotspot: Pixel coordinate (required for edit)

    Returns:
        Instruction string to send alongside the image

    Raises:
        MissingParameterError: If a required parameter is absent or empty
    """
    return INSTRUCTION_BUILDERS[action](prompt, hotspot)
