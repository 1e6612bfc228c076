import importlib
from functools import lru_cache

from loguru import logger
from tree_sitter import Language, Parser

from cyclorank.core import constants as cs
from cyclorank.core import logs as ls
from cyclorank.data_models.types_defs import LanguageLoader

from . import exceptions as ex

_LANGUAGE_MODULES: dict[cs.SupportedLanguage, tuple[str, str]] = {
    cs.SupportedLanguage.GO: (cs.TreeSitterModule.GO, cs.QUERY_LANGUAGE),
}


def _try_import_language(module_path: str, attr_name: str) -> LanguageLoader:
    """Tries to import a language loader from an installed grammar package.

    Args:
        module_path (str): The Python module path (e.g., 'tree_sitter_go').
        attr_name (str): The attribute name for the language loader function.

    Returns:
        LanguageLoader: The language loader function, or None if it fails.
    """
    logger.debug(ls.IMPORTING_MODULE.format(module=module_path))
    try:
        module = importlib.import_module(module_path)
        loader: LanguageLoader = getattr(module, attr_name)
        return loader
    except (ImportError, AttributeError):
        return None


@lru_cache(maxsize=None)
def load_language(lang_name: cs.SupportedLanguage) -> Language:
    """Loads the tree-sitter `Language` of a supported language.

    Args:
        lang_name (cs.SupportedLanguage): The language to load.

    Raises:
        GrammarUnavailableError: If the grammar package is missing or broken.

    Returns:
        Language: The loaded language.
    """
    module_path, attr_name = _LANGUAGE_MODULES[lang_name]
    lang_lib = _try_import_language(module_path, attr_name)
    if not lang_lib:
        logger.debug(ls.LIB_NOT_AVAILABLE.format(lang=lang_name))
        raise ex.GrammarUnavailableError(ex.NO_GRAMMAR.format(lang=lang_name))

    try:
        lang_obj = lang_lib()
        language = lang_obj if isinstance(lang_obj, Language) else Language(lang_obj)
    except Exception as e:
        logger.warning(ls.GRAMMAR_LOAD_FAILED.format(lang=lang_name, error=e))
        raise ex.GrammarUnavailableError(
            ex.GRAMMAR_INIT_FAILED.format(lang=lang_name, error=e)
        ) from e

    logger.debug(ls.GRAMMAR_LOADED.format(lang=lang_name))
    return language


def load_parser(lang_name: cs.SupportedLanguage = cs.SupportedLanguage.GO) -> Parser:
    """Creates a tree-sitter `Parser` for a supported language.

    Args:
        lang_name (cs.SupportedLanguage): The language to parse.

    Raises:
        GrammarUnavailableError: If the grammar cannot be loaded.

    Returns:
        Parser: A parser bound to the language.
    """
    return Parser(load_language(lang_name))
