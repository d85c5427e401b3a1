"""Constants and lookup tables for ReviewLens."""

from types import MappingProxyType

# Topic -> keywords. Declaration order is the tie-break order for ranking.
TOPIC_KEYWORDS = MappingProxyType({
    "Quality": ("quality", "build", "construction", "material", "durable", "sturdy", "solid", "cheap", "flimsy"),
    "Price": ("price", "cost", "expensive", "cheap", "value", "money", "worth", "affordable", "budget"),
    "Shipping": ("shipping", "delivery", "fast", "slow", "arrived", "package", "packaging", "box"),
    "Design": ("design", "look", "appearance", "color", "style", "beautiful", "ugly", "aesthetic"),
    "Customer Service": ("service", "support", "help", "staff", "representative", "response", "communication"),
    "Performance": ("performance", "speed", "fast", "slow", "efficient", "lag", "smooth", "responsive"),
    "Ease of Use": ("easy", "difficult", "simple", "complex", "user-friendly", "intuitive", "confusing"),
})

POSITIVE_PATTERNS = ("excellent", "great", "amazing", "perfect", "love", "fantastic", "outstanding")
NEGATIVE_PATTERNS = ("terrible", "awful", "horrible", "hate", "worst", "disappointing", "poor")


class InsightConstants:
    """Limits for pros/cons extraction."""

    MIN_FRAGMENT_LENGTH = 10  # fragment must be strictly longer (after trim)
    MAX_FRAGMENT_LENGTH = 50  # chars kept before the "..." suffix
    SENTENCE_DELIMITERS = r"[.!?]+"

    MAX_PRO_CANDIDATES = 6  # stop collecting pros at this many
    MAX_PROS = 4
    MAX_CON_CANDIDATES = 4
    MAX_CONS = 3

    FALLBACK_PROS = (
        "Customers appreciate the overall quality",
        "Good value for money",
        "Positive user experience",
    )
    FALLBACK_CONS = (
        "Some room for improvement in design",
        "Could benefit from better instructions",
    )


class TopicConstants:
    """Limits for topic breakdown."""

    MAX_TOPICS = 5
    MAX_KEYWORDS_PER_TOPIC = 3

    # Sentiment badge thresholds (0-100 scale)
    POSITIVE_BAND_MIN = 70
    NEGATIVE_BAND_MAX = 40


class BatchConstants:
    """Classifier batching."""

    BATCH_SIZE = 10
    BATCH_DELAY = 0.1  # seconds between batches


class FallbackConstants:
    """Literal result returned for empty input or failed analysis."""

    OVERALL = 4.2
    POSITIVE = 68
    NEUTRAL = 22
    NEGATIVE = 10
    PROS = ("Analyzing reviews...", "NLP model loading...")
    CONS = ("Please wait for analysis...",)
    TOPIC = "Overall"
    TOPIC_SENTIMENT = 75


class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Demo seed reviews
SAMPLE_REVIEWS = (
    "This product is absolutely amazing! The build quality is excellent and it arrived super fast. Highly recommend!",
    "Great value for money. The design is beautiful and it works perfectly. Customer service was very helpful.",
    "I love this product! It's exactly what I was looking for. Fast shipping and great packaging.",
    "Outstanding quality and performance. Worth every penny. The design is sleek and modern.",
    "Fantastic product! Easy to use and very durable. Great customer support team.",
    "Excellent build quality but the price is a bit high. Overall satisfied with the purchase.",
    "Good product but the instructions were unclear. Design could be better.",
    "The product works fine but shipping was slower than expected. Packaging was adequate.",
    "Average product. Nothing special but does the job. Price is reasonable.",
    "Disappointed with the quality. The design looks cheap and the material feels flimsy.",
    "Terrible customer service. Product arrived damaged and took forever to get a replacement.",
    "Overpriced for what you get. The performance is poor and it broke after a week.",
)
