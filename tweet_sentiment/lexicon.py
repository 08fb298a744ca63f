"""
Lexicon Store - Static slang, emoji, phrase and pattern tables.

============================================================
RESPONSIBILITY
============================================================
Pure data consumed by the normalizer, the rule-based scorer,
the heuristic decision layer and the complex-case handler.

- Modern slang vocabulary with sentiment weights
- Multi-word slang idioms (applied before single terms)
- Emoji sentiment weights
- Sarcasm / negation / temporal / cultural regex families
- Multilingual (EN/ES/DE/FR) word lists

No logic lives here beyond compiling regexes once at import.

============================================================
"""

import re
from dataclasses import dataclass


# ============================================================
# THRESHOLDS
# ============================================================

# Slang heavier than this is rewritten as a strong phrase.
# Tuned constant, kept as-is pending calibration.
STRONG_SLANG_WEIGHT = 1.3

STRONG_POSITIVE_PHRASE = "excellent amazing"
STRONG_NEGATIVE_PHRASE = "terrible awful"
MILD_POSITIVE_PHRASE = "good positive"
MILD_NEGATIVE_PHRASE = "bad negative"
IDIOM_POSITIVE_PHRASE = "excellent amazing"
IDIOM_NEGATIVE_PHRASE = "terrible disappointing"


# ============================================================
# ENTRY TYPES
# ============================================================


@dataclass(frozen=True)
class SlangTerm:
    """Single slang term with its sentiment and weight."""
    term: str
    sentiment: str
    weight: float

    @property
    def pattern(self) -> re.Pattern:
        return re.compile(rf"\b{re.escape(self.term)}\b", re.IGNORECASE)


@dataclass(frozen=True)
class PhrasePattern:
    """Multi-word idiom matched before single-term slang."""
    pattern: re.Pattern
    sentiment: str
    weight: float


@dataclass(frozen=True)
class EmojiWeight:
    emoji: str
    sentiment: str
    weight: float


# ============================================================
# SLANG VOCABULARY
# ============================================================

SLANG_VOCABULARY: tuple[SlangTerm, ...] = (
    # Positive
    SlangTerm("fire", "positive", 1.5),
    SlangTerm("slaps", "positive", 1.5),
    SlangTerm("no cap", "positive", 1.2),
    SlangTerm("cap", "negative", 1.2),
    SlangTerm("bussin", "positive", 1.5),
    SlangTerm("hits different", "positive", 1.3),
    SlangTerm("vibes", "positive", 1.0),
    SlangTerm("chef's kiss", "positive", 1.5),
    SlangTerm("living for", "positive", 1.3),
    SlangTerm("main character energy", "positive", 1.2),
    SlangTerm("understood the assignment", "positive", 1.4),
    SlangTerm("periodt", "positive", 1.1),
    SlangTerm("facts", "positive", 1.1),
    SlangTerm("bet", "positive", 1.0),
    SlangTerm("say less", "positive", 1.1),
    SlangTerm("valid", "positive", 1.2),
    SlangTerm("based", "positive", 1.3),
    SlangTerm("goated", "positive", 1.5),
    SlangTerm("lowkey goated", "positive", 1.4),
    SlangTerm("highkey goated", "positive", 1.5),
    SlangTerm("sick", "positive", 1.4),
    SlangTerm("lit", "positive", 1.4),
    SlangTerm("dope", "positive", 1.3),
    SlangTerm("W", "positive", 1.3),
    SlangTerm("massive W", "positive", 1.5),
    SlangTerm("big W", "positive", 1.4),
    SlangTerm("absolute W", "positive", 1.5),
    SlangTerm("clean", "positive", 1.2),
    SlangTerm("crisp", "positive", 1.2),
    SlangTerm("smooth", "positive", 1.2),
    SlangTerm("immaculate", "positive", 1.5),
    SlangTerm("fr fr", "positive", 1.1),
    # Negative
    SlangTerm("mid", "negative", 1.3),
    SlangTerm("ain't it", "negative", 1.2),
    SlangTerm("not it", "negative", 1.4),
    SlangTerm("ick", "negative", 1.5),
    SlangTerm("cringe", "negative", 1.4),
    SlangTerm("toxic", "negative", 1.5),
    SlangTerm("sus", "negative", 1.2),
    SlangTerm("pressed", "negative", 1.3),
    SlangTerm("salty", "negative", 1.2),
    SlangTerm("ratio", "negative", 1.3),
    SlangTerm("cope", "negative", 1.2),
    SlangTerm("L take", "negative", 1.4),
    SlangTerm("took an L", "negative", 1.3),
    SlangTerm("massive L", "negative", 1.5),
    SlangTerm("down bad", "negative", 1.4),
    SlangTerm("fell off", "negative", 1.3),
    SlangTerm("trash", "negative", 1.4),
    SlangTerm("garbage", "negative", 1.4),
    SlangTerm("wack", "negative", 1.3),
    SlangTerm("whack", "negative", 1.3),
    SlangTerm("fumbled the bag", "negative", 1.4),
    SlangTerm("fumbled", "negative", 1.2),
    SlangTerm("straight up broken", "negative", 1.5),
    SlangTerm("L", "negative", 1.2),
    SlangTerm("big L", "negative", 1.4),
    SlangTerm("yikes", "negative", 1.3),
    SlangTerm("oof", "negative", 1.2),
    SlangTerm("rip", "negative", 1.2),
    SlangTerm("rekt", "negative", 1.3),
    SlangTerm("broken", "negative", 1.3),
    # Neutral: kept verbatim but still flags slang
    SlangTerm("lowkey", "neutral", 0.8),
    SlangTerm("highkey", "neutral", 1.1),
    SlangTerm("ngl", "neutral", 1.0),
    SlangTerm("tbh", "neutral", 1.0),
    SlangTerm("fr", "neutral", 1.0),
    SlangTerm("deadass", "neutral", 1.0),
    SlangTerm("on god", "neutral", 1.0),
    SlangTerm("respectfully", "neutral", 1.0),
)

SLANG_PATTERNS: tuple[tuple[SlangTerm, re.Pattern], ...] = tuple(
    (entry, entry.pattern) for entry in SLANG_VOCABULARY
)


def _phrase(expr: str, sentiment: str, weight: float) -> PhrasePattern:
    return PhrasePattern(re.compile(expr, re.IGNORECASE), sentiment, weight)


PHRASE_PATTERNS: tuple[PhrasePattern, ...] = (
    _phrase(r"this\s+ain't\s+it", "negative", 1.4),
    _phrase(r"not\s+it\s+chief", "negative", 1.3),
    _phrase(r"major\s+disappointment", "negative", 1.5),
    _phrase(r"straight\s+up\s+trash", "negative", 1.5),
    _phrase(r"straight\s+up\s+fire", "positive", 1.5),
    _phrase(r"straight\s+up\s+broken", "negative", 1.5),
    _phrase(r"no\s+cap", "positive", 1.2),
    _phrase(r"hits\s+different", "positive", 1.3),
    _phrase(r"chef's\s+kiss", "positive", 1.5),
    _phrase(r"lowkey\s+goated", "positive", 1.4),
    _phrase(r"highkey\s+goated", "positive", 1.5),
    _phrase(r"not\s+gonna\s+lie", "positive", 1.1),
    _phrase(r"fr\s+fr", "positive", 1.1),
    _phrase(r"fumbled\s+the\s+bag", "negative", 1.4),
    _phrase(r"absolutely\s+fire", "positive", 1.5),
    _phrase(r"it's\s+bussin", "positive", 1.4),
    _phrase(r"that's\s+cap", "negative", 1.3),
    _phrase(r"lowkey\s+(fire|sick|good|amazing)", "positive", 1.3),
    _phrase(r"highkey\s+(fire|sick|good|amazing)", "positive", 1.4),
)


# ============================================================
# EMOJI
# ============================================================

EMOJI_WEIGHTS: tuple[EmojiWeight, ...] = (
    EmojiWeight("🔥", "positive", 1.3),
    EmojiWeight("💯", "positive", 1.4),
    EmojiWeight("✨", "positive", 1.2),
    EmojiWeight("🙌", "positive", 1.3),
    EmojiWeight("👏", "positive", 1.2),
    EmojiWeight("😍", "positive", 1.4),
    EmojiWeight("🥳", "positive", 1.5),
    EmojiWeight("💀", "negative", 1.3),  # mostly ironic
    EmojiWeight("😤", "negative", 1.4),
    EmojiWeight("🤬", "negative", 1.5),
    EmojiWeight("😠", "negative", 1.4),
    EmojiWeight("🤦‍♀️", "negative", 1.3),
    EmojiWeight("🤦‍♂️", "negative", 1.3),
    EmojiWeight("🙄", "negative", 1.2),
)

# Presence lists used by the heuristic decision layer
POSITIVE_EMOJIS = ("😍", "😊", "😀", "😁", "👍", "✨", "🎉", "🔥", "❤️", "♥️", "😻", "🤩")
NEGATIVE_EMOJIS = ("😡", "😠", "😤", "😢", "😭", "👎", "💀", "🤬", "🙄", "😒", "😞", "😕")
NEUTRAL_EMOJIS = ("😐", "🤔", "😶")


# ============================================================
# NORMALIZER TABLES
# ============================================================

COMPLAINT_WORDS = ("lost", "worst", "never", "again", "terrible", "awful", "broke", "broken")
PRAISE_WORDS = ("amazing", "incredible", "best", "love", "perfect", "excellent", "great")

MENTION_COMPLAINT = "customer_service_complaint"
MENTION_PRAISE = "brand_mention_positive"
MENTION_NEUTRAL = "brand_mention"

HASHTAG_PHRASES: dict[str, str] = {
    "neveragain": "never again terrible",
    "worstever": "worst ever",
    "disappointed": "disappointed",
    "amazing": "amazing",
    "perfect": "perfect",
    "love": "love",
}

INTENSIFIER_WORDS = (
    "absolutely", "extremely", "incredibly", "amazing", "terrible",
    "awful", "fantastic", "horrible", "outstanding", "dreadful",
    "brilliant", "appalling", "superb", "atrocious", "excellent",
)

CONTRACTIONS: dict[str, str] = {
    "ain't": "is not",
    "can't": "cannot",
    "won't": "will not",
    "don't": "do not",
    "isn't": "is not",
    "wasn't": "was not",
    "weren't": "were not",
    "haven't": "have not",
    "hasn't": "has not",
    "shouldn't": "should not",
    "wouldn't": "would not",
    "couldn't": "could not",
    "didn't": "did not",
}


# ============================================================
# HEURISTIC DECISION LISTS (substring matched)
# ============================================================

HEURISTIC_POSITIVE_WORDS = (
    "love", "amazing", "awesome", "great", "fantastic", "excelente",
    "me encanta", "genial", "perfecto", "recomend", "impresionante",
    "increíble", "rápido", "cumple", "gracias :)",
)

HEURISTIC_NEGATIVE_WORDS = (
    "hate", "awful", "terrible", "horrible", "bad", "malo", "pésimo",
    "decepcion", "tarde", "lento", "caro", "estafa", "nunca más",
    "no sirve", "fatal", ":(",
)

HEURISTIC_NEGATION = re.compile(r"\b(no|nunca|jamás|never|not)\b")


# ============================================================
# RULE-BASED SCORER LEXICON (EN / ES / DE / FR)
# ============================================================

RULE_POSITIVE_WORDS = frozenset({
    # English
    "amazing", "awesome", "excellent", "fantastic", "great", "love", "perfect", "wonderful",
    "best", "incredible", "outstanding", "brilliant", "superb", "magnificent", "spectacular",
    "good", "nice", "happy", "pleased", "satisfied", "delighted", "thrilled", "excited",
    "beautiful", "stunning", "gorgeous", "impressive", "remarkable", "exceptional",
    "fabulous", "marvelous", "terrific", "splendid", "divine", "phenomenal", "extraordinary",
    "flawless", "elite", "premium", "superior", "stellar", "epic", "legendary", "iconic",
    "masterpiece", "genius", "breakthrough", "revolutionary", "innovative",
    "joy", "bliss", "cheerful", "optimistic", "hopeful", "confident", "proud",
    "grateful", "thankful", "blessed", "fortunate", "lucky",
    "quality", "value", "bargain", "worth", "worthwhile", "beneficial", "useful",
    "helpful", "effective", "efficient", "reliable", "trustworthy", "authentic", "genuine",
    "positive", "impressed",
    # Spanish
    "increíble", "excelente", "fantástico", "maravilloso", "perfecto", "genial", "súper",
    "bueno", "buena", "buenas", "buenos", "magnífico", "espectacular", "extraordinario",
    "encanta", "encanto", "amo", "adoro", "feliz", "contento", "satisfecho", "emocionado",
    "fabuloso", "estupendo", "fenomenal", "precioso", "hermoso", "bello",
    "impresionante", "sorprendente", "asombroso", "brillante", "ideal", "óptimo",
    "exquisito", "delicioso", "sabroso", "calidad",
    # German
    "wunderbar", "fantastisch", "großartig", "ausgezeichnet", "perfekt", "toll",
    "gut", "schön", "herrlich", "fabelhaft", "erstaunlich", "beeindruckend",
    "glücklich", "zufrieden", "begeistert", "erfreut", "froh", "dankbar", "stolz",
    "unglaublich", "hervorragend", "erstklassig", "weltklasse", "meisterhaft",
    "hilfreich", "nützlich", "wertvoll",
    # French
    "merveilleux", "fantastique", "parfait", "magnifique", "superbe", "génial",
    "bon", "bonne", "bons", "bonnes", "beau", "belle", "joli", "jolie", "formidable",
    "heureux", "heureuse", "content", "contente", "satisfait", "satisfaite", "ravi", "ravie",
    "incroyable", "exceptionnel", "remarquable", "impressionnant", "splendide", "sublime",
    "élégant", "efficace", "fiable", "précieux",
    # Colloquial
    "cool", "rad", "dope", "lit", "fire", "tight", "fresh", "legit", "solid",
    "clutch", "mint", "clean", "smooth", "sweet",
})

RULE_NEGATIVE_WORDS = frozenset({
    # English
    "awful", "terrible", "horrible", "worst", "hate", "disgusting", "pathetic", "useless",
    "bad", "poor", "disappointing", "frustrating", "annoying", "broken", "failed", "wrong",
    "sad", "angry", "upset", "disappointed", "unhappy", "concerned", "worried", "confused",
    "ugly", "boring", "slow", "expensive", "cheap", "fake", "overpriced", "uncomfortable",
    "dreadful", "appalling", "atrocious", "abysmal", "deplorable", "despicable",
    "revolting", "repulsive", "sickening", "vile", "foul", "rotten", "corrupt",
    "toxic", "harmful", "damaging", "destructive", "disastrous", "catastrophic",
    "defective", "flawed", "faulty", "inferior", "substandard", "mediocre", "inadequate",
    "furious", "enraged", "livid", "outraged", "disgusted", "horrified",
    "devastated", "heartbroken", "depressed", "miserable", "nightmare", "hell",
    "problem", "issue", "trouble", "error", "mistake", "bug", "glitch", "crash",
    "crashes", "breaks", "fails", "freeze", "lag", "delay", "waste", "loss", "damage",
    "negative",
    # Spanish
    "malo", "mala", "malos", "malas", "pésimo", "fatal", "desastre", "disgusto",
    "odio", "detesto", "asco", "repugnante", "asqueroso", "triste", "enfadado",
    "molesto", "frustrado", "decepcionado", "preocupado", "espantoso", "horroroso",
    "lamentable", "patético", "vergonzoso", "inaceptable", "problema", "fallo",
    "defecto", "basura", "porquería", "chatarra",
    # German
    "schrecklich", "furchtbar", "schlecht", "schlimm", "schlimmer", "schlechteste",
    "hassen", "ekelhaft", "widerlich", "entsetzlich", "traurig", "wütend", "ärgerlich",
    "frustriert", "enttäuscht", "besorgt", "katastrophal", "fehlerhaft", "mangelhaft",
    "minderwertig", "mittelmäßig", "fehler", "schaden", "verlust", "alptraum", "hölle",
    # French
    "affreux", "épouvantable", "mauvais", "mauvaise", "pire", "détester", "dégoûtant",
    "répugnant", "pathétique", "inutile", "nul", "fâché", "frustré", "déçu", "inquiet",
    "catastrophique", "désastreux", "défectueux", "médiocre", "problème", "erreur",
    "panne", "cauchemar", "enfer",
    # Colloquial
    "trash", "garbage", "crap", "junk", "rubbish", "mess", "disaster", "joke",
    "scam", "ripoff", "fraud", "phony", "bogus", "sketchy",
})

# Intensifier multipliers, nearest one within the window wins
STRONG_INTENSIFIERS = frozenset({
    "extremely", "incredibly", "absolutely", "tremendously", "enormously",
    "extremadamente", "increíblemente", "absolutamente", "tremendamente",
})
MEDIUM_INTENSIFIERS = frozenset({
    "very", "really", "super", "quite", "pretty",
    "muy", "súper", "bastante", "realmente",
})
WEAK_INTENSIFIERS = frozenset({
    "somewhat", "rather", "fairly", "slightly",
    "algo", "poco", "ligeramente",
})
RULE_INTENSIFIERS = STRONG_INTENSIFIERS | MEDIUM_INTENSIFIERS | WEAK_INTENSIFIERS | frozenset({
    "totally", "completely", "truly", "deeply", "ultra", "mega", "hyper",
    "immensely", "exceptionally", "remarkably", "particularly", "especially",
    "highly", "strongly", "intensely", "seriously", "massively", "hugely",
    "totalmente", "completamente", "verdaderamente", "profundamente", "demasiado",
    "tan", "mucho", "sumamente", "sehr", "extrem", "absolut", "völlig", "komplett",
    "wirklich", "ziemlich", "ganz", "besonders", "très", "extrêmement",
    "absolument", "totalement", "complètement", "vraiment", "plutôt", "hella",
    "crazy", "mad", "wicked", "insanely", "ridiculously", "freaking",
})

RULE_NEGATORS = frozenset({
    "not", "no", "never", "none", "nothing", "nobody", "nowhere", "cannot",
    "without", "lack", "lacking", "missing", "hardly", "barely", "scarcely",
    "rarely", "seldom", "neither", "nor", "unable",
    "nunca", "jamás", "nada", "nadie", "ningún", "ninguna", "ninguno", "sin",
    "tampoco", "apenas", "ni",
    "nicht", "nein", "nie", "niemals", "nichts", "niemand", "kein", "keine", "ohne", "kaum",
    "ne", "pas", "non", "jamais", "rien", "aucun", "aucune", "sans",
    "aint", "nope", "nah",
})

EMOTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "joy": (
        "happy", "joy", "joyful", "excited", "thrilled", "delighted", "cheerful",
        "love", "loving", "ecstatic", "optimistic", "hopeful", "celebrate", "fun",
        "wonderful", "amazing", "fantastic", "awesome", "great", "feliz", "alegre",
        "contento", "glücklich", "freude", "heureux", "joie", "smile", "laugh",
    ),
    "sadness": (
        "sad", "sadness", "depressed", "disappointed", "disappointment", "heartbroken",
        "sorry", "grief", "miserable", "devastated", "broken", "hurt", "pain", "tears",
        "cry", "crying", "triste", "tristeza", "decepcionado", "traurig", "enttäuscht",
        "déçu", "tristesse",
    ),
    "anger": (
        "angry", "anger", "furious", "rage", "mad", "livid", "outraged", "annoyed",
        "irritated", "frustrated", "hate", "hatred", "despise", "unacceptable",
        "enfadado", "enojado", "furioso", "odio", "wütend", "hass", "colère", "furieux",
    ),
    "fear": (
        "scared", "afraid", "fear", "terrified", "panic", "anxious", "anxiety",
        "worried", "nervous", "stressed", "dread", "unsafe", "dangerous", "miedo",
        "asustado", "angst", "peur", "inquiet",
    ),
    "surprise": (
        "surprised", "surprise", "amazed", "astonished", "shocked", "stunned",
        "unexpected", "wow", "whoa", "omg", "unbelievable", "sorprendido", "sorpresa",
        "überrascht", "surpris", "étonné",
    ),
    "disgust": (
        "disgusting", "disgusted", "gross", "revolting", "nauseating", "vile", "foul",
        "rotten", "yuck", "ew", "nasty", "filthy", "asco", "asqueroso", "ekelhaft",
        "dégoûtant",
    ),
}


# ============================================================
# COMPLEX-CASE PATTERN FAMILIES
# ============================================================

_POSITIVE_ADJ = r"good|great|amazing|perfect|wonderful|fantastic|excellent|brilliant"

SARCASM_QUOTED_POSITIVE = re.compile(
    rf"['\"‘“]([^'\"’”]*(?:{_POSITIVE_ADJ})[^'\"’”]*)['\"’”]",
    re.IGNORECASE,
)
SARCASM_CONTRADICTION = re.compile(
    r"\b(love|great|amazing|perfect|wonderful|fantastic|excellent|brilliant|good)\b"
    r"[^.!?\n]*\b(but|however|though|although|yet)\b"
    r"[^.!?\n]*\b(terrible|awful|bad|worst|hate|horrible|disgusting|pathetic|useless|"
    r"broken|slow|worse|crashes|fails|disappointing)\b",
    re.IGNORECASE,
)
SARCASM_TEMPORAL_DISPLACEMENT = re.compile(
    r"\b(was|used to be)\s+\w+\s+\b(but|now|today|currently)\b", re.IGNORECASE
)
SARCASM_IRONIC_PHRASES = re.compile(
    r"\b(oh\s+(great|wonderful|perfect|fantastic|brilliant)|just\s+(great|perfect|what|wonderful)|"
    r"exactly\s+what|how\s+(wonderful|perfect|great)|perfect\s+timing|great\s+job)\b",
    re.IGNORECASE,
)
SARCASM_SUSPICIOUS_ELLIPSIS = re.compile(
    r"\b(great|perfect|amazing|wonderful|excellent|brilliant|good)\b.*(\.\.\.|…)", re.IGNORECASE
)
SARCASM_FAKE_ENTHUSIASM = re.compile(
    r"\b(amazing|wonderful|perfect|great|excellent|brilliant)\s+(how|that)\b", re.IGNORECASE
)
SARCASM_ELONGATION = re.compile(r"\b\w*([aeiou])\1{2,}\w*\b", re.IGNORECASE)
SARCASM_EXCLAIMED_CRITIQUE = re.compile(
    r"\b(amazing|great|perfect|wonderful|excellent|fantastic)!\s*.*"
    r"\b(but|however|unfortunately|sadly|except|crashes|broken|fails|slow|terrible|awful|horrible)\b",
    re.IGNORECASE,
)

DOUBLE_NEGATION_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(expr, re.IGNORECASE)
    for expr in (
        r"\b(can't|cannot|can’t)\s+(say|deny|argue)\s+(i'm|i’m|im|i\s+am)\s+not\b",
        r"\b(not)\s+\w+\s+(at\s+all)\b",
        r"\b(wasn't|wasnt)\s+\w+\s+(much|really)\s+(but)\b",
        r"\b(couldn't|couldnt)\s+(be|seem)\s+(more|less)\s+\w+",
        r"\b(wouldn't|wouldnt)\s+(say|call|consider)\s+(it|this|that)\s+\w+",
        r"\b(not)\s+(un\w+|dis\w+)",
        r"\b(never)\s+(not|been)\s+(more|less)\b",
        r"\b(hardly|barely)\s+(not|un\w+)",
    )
)

TEMPORAL_PAST = re.compile(
    r"\b(was|were|used to|back then|before|previously|in 20\d{2})\b", re.IGNORECASE
)
TEMPORAL_PRESENT = re.compile(r"\b(is|are|now|currently|today|this|these days)\b", re.IGNORECASE)
TEMPORAL_FUTURE = re.compile(r"\b(will|gonna|going to|next|future|upcoming)\b", re.IGNORECASE)

CULTURAL_SLANG: dict[str, re.Pattern] = {
    "argentine": re.compile(
        r"\b(posta|re\s+\w+|la\s+rompe|genial|de\s+diez|copado|bárbaro)\b", re.IGNORECASE
    ),
    "mexican": re.compile(r"\b(chido|padrísimo|está\s+padre|qué\s+onda)\b", re.IGNORECASE),
    "british": re.compile(
        r"\b(brilliant|cheers|mental|proper|naff|dodgy|chuffed)\b", re.IGNORECASE
    ),
    "american": re.compile(r"\b(awesome|dope|lit|fire|sick|rad)\b", re.IGNORECASE),
}

FORMAL_WORDS = re.compile(
    r"\b(furthermore|moreover|nevertheless|consequently|therefore)\b", re.IGNORECASE
)
INFORMAL_WORDS = re.compile(r"\b(yeah|yep|nope|gonna|wanna|kinda|sorta)\b", re.IGNORECASE)

TYPO_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b\w*([aeiou])\1{2,}\w*\b", re.IGNORECASE),
    re.compile(r"\b\w*([bcdfghjklmnpqrstvwxyz])\1{2,}\w*\b", re.IGNORECASE),
    re.compile(r"\b(teh|hte|adn|nad|froem)\b", re.IGNORECASE),
    re.compile(r"\b\w{6,}[bcdfghjklmnpqrstvwxyz]{3,}\b", re.IGNORECASE),
)

CONTRADICTION_NEGATIVE_WORDS = re.compile(
    r"\b(bad|terrible|awful|hate|worst|horrible)\b", re.IGNORECASE
)
CONTRADICTION_POSITIVE_WORDS = re.compile(
    r"\b(good|great|love|amazing|perfect|excellent)\b", re.IGNORECASE
)

LANGUAGE_HINTS: dict[str, re.Pattern] = {
    "es": re.compile(r"\b(el|la|que|de|pero|con|por|y|es|está|muy|más)\b", re.IGNORECASE),
    "fr": re.compile(r"\b(le|la|les|et|des|que|pour|dans|avec|très|plus)\b", re.IGNORECASE),
    "de": re.compile(r"\b(der|die|das|und|nicht|mit|ein|eine|sehr|mehr)\b", re.IGNORECASE),
}

MIXED_LANGUAGE_MARKERS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(the|and|but|with|this|that)\b", re.IGNORECASE),
    re.compile(r"\b(el|la|que|de|pero|con)\b", re.IGNORECASE),
    re.compile(r"\b(le|la|les|et|des|que)\b", re.IGNORECASE),
    re.compile(r"\b(der|die|das|und|nicht)\b", re.IGNORECASE),
)


# ============================================================
# NAIVE BAYES STOPWORDS
# ============================================================

STOPWORDS = frozenset({
    # English
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "must",
    # Spanish
    "el", "la", "los", "las", "un", "una", "y", "o", "pero", "en", "de", "del", "al",
    "por", "para", "con", "es", "son", "fue", "ser", "estar", "que", "se", "le", "lo",
    # German
    "der", "die", "das", "den", "dem", "des", "ein", "eine", "und", "oder", "aber",
    "auf", "zu", "von", "mit", "für", "ist", "sind", "war",
    # French
    "les", "une", "et", "ou", "mais", "dans", "du", "au", "aux", "pour", "avec",
    "est", "sont", "qui", "nous", "vous",
})
