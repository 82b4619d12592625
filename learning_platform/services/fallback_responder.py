"""
Offline tutoring answers — used whenever the OpenAI call is unavailable.

Answers come from an ordered keyword table: the first rule with a trigger
contained in the lowercased question wins, otherwise DEFAULT_ANSWER.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Rule:
    """A canned answer and the substrings that select it."""

    topic: str
    triggers: Tuple[str, ...]
    answer: str

    def matches(self, lowered: str) -> bool:
        return any(trigger in lowered for trigger in self.triggers)


# ─────────────────────────────────────────────────────────
#  RULE TABLE  (order is priority)
# ─────────────────────────────────────────────────────────

RULES: Tuple[Rule, ...] = (
    # ── Math ─────────────────────────────────────────────
    Rule(
        topic="math.multiplication",
        triggers=("multiply", "multiplication", "times"),
        answer=(
            "Multiplication is repeated addition! For example, 3 × 4 means adding 3 four times: "
            "3+3+3+3 = 12. The multiplication tables help you remember these quickly. "
            "Would you like to practice any specific table?"
        ),
    ),
    Rule(
        topic="math.division",
        triggers=("divide", "division"),
        answer=(
            "Division is splitting things into equal parts! If you have 12 apples and want to share "
            "them among 3 friends, each gets 4 apples (12 ÷ 3 = 4). "
            "Think of it as the opposite of multiplication!"
        ),
    ),
    Rule(
        topic="math.fractions",
        triggers=("fraction",),
        answer=(
            "Fractions represent parts of a whole! Like if you cut a roti into 4 pieces and eat 1 piece, "
            "you ate 1/4 (one-fourth) of the roti. The top number shows parts you have, "
            "bottom shows total parts."
        ),
    ),
    Rule(
        topic="math.general",
        triggers=("math", "addition", "add", "subtract", "minus"),
        answer=(
            "Mathematics is fun! Addition means combining numbers (5+3=8), and subtraction means "
            "taking away (10-4=6). Think of it like adding or removing mangoes from a basket. "
            "Would you like to practice some problems?"
        ),
    ),

    # ── Science ──────────────────────────────────────────
    Rule(
        topic="science.water_cycle",
        triggers=("water cycle", "rain", "evaporation"),
        answer=(
            "The water cycle is amazing! ☀️ Sun heats water → 💨 Water evaporates (becomes vapor) → "
            "☁️ Forms clouds → 🌧️ Rain falls → 🌊 Collects in rivers/oceans → Cycle repeats! "
            "This is how Punjab gets monsoon rains!"
        ),
    ),
    Rule(
        topic="science.photosynthesis",
        triggers=("photosynthesis", "how plant", "plant make food"),
        answer=(
            "Plants are like little factories! They use: 🌞 Sunlight + 💧 Water + 🌫️ CO2 (from air) → "
            "🍃 Make their own food (glucose) + Release oxygen for us to breathe! "
            "The green color (chlorophyll) helps capture sunlight."
        ),
    ),
    Rule(
        topic="science.solar_system",
        triggers=("solar system", "planet", "sun", "earth"),
        answer=(
            "Our Solar System has 8 planets revolving around the Sun! 🌞 Mercury, Venus, Earth (our home!), "
            "Mars, Jupiter, Saturn, Uranus, Neptune. Earth is special - it has water, air, and life! "
            "It takes 365 days to go around the Sun."
        ),
    ),
    Rule(
        topic="science.general",
        triggers=("science", "plant", "animal", "bird"),
        answer=(
            "Science helps us understand the world! 🌱 Plants need sunlight, water, and soil to grow. "
            "🐕 Animals need food, water, shelter, and air to survive. Punjab has beautiful crops like "
            "wheat and rice, and birds like sparrows and parrots!"
        ),
    ),

    # ── Punjabi ──────────────────────────────────────────
    Rule(
        topic="punjabi.gurmukhi",
        triggers=("gurmukhi", "punjabi alphabet", "ਅੱਖਰ"),
        answer=(
            "Gurmukhi script has 35 letters (akhar)! The vowels are: ਅ ਆ ਇ ਈ ਉ ਊ ਏ ਐ ਓ ਔ. "
            "Consonants start with: ਸ ਹ ਕ ਖ ਗ ਘ ਙ... It was standardized by Guru Angad Dev Ji. "
            "Practice writing one letter daily!"
        ),
    ),
    Rule(
        topic="punjabi.language",
        triggers=("punjabi", "ਪੰਜਾਬੀ"),
        answer=(
            "Punjabi is our beautiful mother tongue! It's written in Gurmukhi script with 35 letters. "
            "Common words: ਸਤ ਸ੍ਰੀ ਅਕਾਲ (Hello), ਧੰਨਵਾਦ (Thank you), ਪਾਣੀ (Water). "
            "Would you like to learn some words or letters?"
        ),
    ),

    # ── English ──────────────────────────────────────────
    Rule(
        topic="english.grammar",
        triggers=("grammar", "noun", "verb"),
        answer=(
            "English grammar is important! 📝 NOUN = naming word (boy, Punjab, school), "
            "VERB = action word (run, study, eat), ADJECTIVE = describing word (beautiful, smart). "
            'Example: "The clever student reads books." Try making your own sentence!'
        ),
    ),
    Rule(
        topic="english.tenses",
        triggers=("tense", "past", "present", "future"),
        answer=(
            "Tenses show time! ⏰ PRESENT: I study (now), PAST: I studied (before), "
            'FUTURE: I will study (later). Practice: "I eat rice" (present), "I ate rice" (past), '
            '"I will eat rice" (future). What tense do you need help with?'
        ),
    ),
    Rule(
        topic="english.general",
        triggers=("english", "alphabet"),
        answer=(
            "English has 26 letters: A-Z! 🔤 Vowels (A,E,I,O,U) are special letters. Practice: "
            "Read English books daily, watch English cartoons, speak with friends. "
            "Start with simple words: CAT, DOG, SUN, MOON. What would you like to learn?"
        ),
    ),

    # ── Social Studies ───────────────────────────────────
    Rule(
        topic="social.punjab",
        triggers=("punjab", "capital", "chandigarh"),
        answer=(
            "Punjab is our beautiful state! 🌾 Capital: Chandigarh, Language: Punjabi, "
            "Famous for: Golden Temple, agriculture (wheat, rice), Bhangra dance, and brave people. "
            'Major cities: Amritsar, Ludhiana, Jalandhar, Patiala. Punjab means "Land of Five Rivers"!'
        ),
    ),
    Rule(
        topic="social.india",
        triggers=("india", "country", "delhi"),
        answer=(
            "India is our great country! 🇮🇳 Capital: New Delhi, National Animal: Tiger, "
            "National Bird: Peacock, National Flower: Lotus. India has 28 states and 8 union territories. "
            "We have diverse cultures, languages, and religions living together!"
        ),
    ),
    Rule(
        topic="social.festivals",
        triggers=("festival", "baisakhi", "diwali", "lohri"),
        answer=(
            "Punjab celebrates many festivals! 🎉 Baisakhi (harvest festival), Lohri (winter festival), "
            "Diwali (festival of lights), Holi (festival of colors), Gurpurab (Guru's birthday). "
            "These bring families together with food, dance, and joy!"
        ),
    ),

    # ── Conversational ───────────────────────────────────
    Rule(
        topic="meta.study_tips",
        triggers=("how to study", "study tips"),
        answer=(
            "Great study tips! 📚 1) Study same time daily 2) Take short breaks 3) Teach others what you "
            "learn 4) Make colorful notes 5) Ask questions when confused 6) Practice problems daily "
            "7) Sleep well 8) Stay positive! Which subject do you want to focus on?"
        ),
    ),
    Rule(
        topic="meta.help",
        triggers=("help", "homework", "doubt"),
        answer=(
            "I'm here to help you! 🎓 Tell me specifically: What subject? What topic? "
            'What don\'t you understand? For example: "Help me with multiplication tables" or '
            '"Explain water cycle". The more specific you are, the better I can help!'
        ),
    ),
    Rule(
        topic="meta.thanks",
        triggers=("thank", "thanks"),
        answer=(
            "You're welcome! 😊 Keep learning and asking questions. Remember, there's no silly question "
            "- every question helps you learn! What else would you like to know?"
        ),
    ),
    Rule(
        topic="meta.identity",
        triggers=("who are you", "what are you"),
        answer=(
            "I'm your AI Learning Assistant! 🤖 I'm here to help you understand Math, Science, English, "
            "Punjabi, and Social Studies. I can explain concepts, give examples, and answer your questions. "
            "Think of me as your study buddy available anytime!"
        ),
    ),
)

DEFAULT_ANSWER = (
    "I'd love to help you learn! I can explain topics in:\n\n"
    "📐 Math - Addition, subtraction, multiplication, division, fractions\n"
    "🔬 Science - Plants, animals, water cycle, solar system\n"
    "📚 Punjabi - Gurmukhi alphabet, words, grammar\n"
    "🌍 English - Alphabet, grammar, tenses, vocabulary\n"
    "🌾 Social Studies - Punjab, India, festivals, geography\n\n"
    'Please ask me something specific like "Explain multiplication" or "What is the water cycle?" '
    "and I'll give you a clear answer!"
)


# ─────────────────────────────────────────────────────────
#  MATCHING
# ─────────────────────────────────────────────────────────

def match_rule(question: str, rules: Tuple[Rule, ...] = RULES) -> Optional[Rule]:
    """Return the first rule triggered by ``question``, or None."""
    lowered = question.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule
    return None


def respond(question: str, rules: Tuple[Rule, ...] = RULES) -> str:
    rule = match_rule(question, rules)
    return rule.answer if rule is not None else DEFAULT_ANSWER
