from .analytics import ResultSummary, summarize_results
from .collaborators import DictTranslator, SpeechRecognizer, Translator
from .ranker import Ranker
from .scorer import CorpusStatistics, ScoreBreakdown, SimilarityScorer
from .search_engine import ErrorKind, SearchEngine, SearchError, SearchOutcome
from .suggestions import SuggestionGenerator
from .tokenizer import STOPWORDS, tokenize

__all__ = [
    "STOPWORDS",
    "CorpusStatistics",
    "DictTranslator",
    "ErrorKind",
    "Ranker",
    "ResultSummary",
    "ScoreBreakdown",
    "SearchEngine",
    "SearchError",
    "SearchOutcome",
    "SimilarityScorer",
    "SpeechRecognizer",
    "SuggestionGenerator",
    "Translator",
    "summarize_results",
    "tokenize",
]
