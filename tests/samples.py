"""Sample texts written by people and by language models."""

AI_TEXT = (
    "In today's digital landscape, it's important to note that artificial "
    "intelligence is playing a crucial role. Furthermore, the integration of "
    "automated systems continues to expand. Consequently, many organizations are "
    "now leveraging these tools to improve efficiency. In conclusion, the future of "
    "technology appears to be inextricably linked with AI development. Moreover, the "
    "rapid advancement of language models provides a significant boost to digital "
    "transformation efforts across all major sectors of the modern economy. It is "
    "worth mentioning that these systems are designed to optimize complex processes "
    "with high precision."
)

HUMAN_TEXT = (
    "I was just wandering around the park today when I saw the weirdest thing. A "
    "squirrel was trying to steal a whole slice of pizza from a trash can! It was "
    "actually quite impressed by the little guy's determination. I mean, who doesn't "
    "love pizza? Anyway, it made me laugh and I wanted to tell someone about it. Life "
    "is funny sometimes. I think I'll go back tomorrow and see if he's still there. "
    "Maybe I'll bring some actual nuts this time instead of just watching him "
    "struggle with junk food. It's the little moments like these that make my "
    "weekends so much better than the stressful work week."
)

GPT_TEXT = (
    "In today's digital landscape, it's important to note that artificial "
    "intelligence is revolutionizing the way we work. Moreover, this paradigm shift "
    "will delve into new possibilities. Furthermore, it's worth mentioning that the "
    "landscape of technology continues to evolve. In conclusion, these developments "
    "are transforming our world in unprecedented ways that will shape the future of "
    "innovation and progress across multiple industries and sectors."
)

CLAUDE_TEXT = (
    "I appreciate your question about this topic. I'd be happy to help explain this "
    "concept in detail. To be clear, there are several important factors to consider "
    "when approaching this subject. In this case, it's worth noting that the approach "
    "may vary depending on your specific needs and circumstances. I understand this "
    "can be complex, so feel free to let me know if you need any clarification on "
    "these points or would like me to elaborate further."
)

GEMINI_TEXT = (
    "Sure, here's what you need to know about this topic. Absolutely, this is a great "
    "question! Let's break this down into key takeaways. In a nutshell, the bottom "
    "line is that these concepts are interconnected. Definitely, here's what makes "
    "this approach effective for achieving your goals. To sum up, the key takeaway is "
    "understanding how these elements work together to create meaningful results."
)

GEMINI_STRUCTURED_TEXT = """\
### 🧠 The Context Window: Your AI’s "Working Memory"

Think of the context window as the desk space an AI has to work with.

* **Small window:** The AI can only look at a few pages of a book at a time.
* **Large window:** The AI can "read" entire libraries, thousands of lines of code, \
or massive legal documents in one go.

### ⚠️ The "Lost in the Middle" Phenomenon

As context windows grow (reaching 1M+ tokens), a specific type of hallucination \
occurs. Research shows that models are great at recalling information at the very \
beginning or the very end of a prompt, but they often "forget" or distort details \
buried in the middle.

### 🛠️ How to Minimize Hallucinations in Large Contexts

If you are building with LLMs, don't just rely on a massive window. Use these \
strategies:

1. **Needle-in-a-Haystack Testing:** Periodically test if your model can actually \
retrieve specific facts from a massive prompt.
2. **RAG (Retrieval-Augmented Generation):** Instead of shoving 100 documents into \
the context window, use RAG to find the *most relevant* snippets first. It’s cleaner \
and more accurate.

#AI #MachineLearning #LLM
"""

CLAUDE_WRITERLY_TEXT = """\
Let's talk about a common misconception in AI: bigger context windows = more \
hallucinations.

Not true.

Context windows are how much information an AI can "remember" during a \
conversation. GPT-4 started with 8K tokens, Claude now handles 200K+, and we're \
heading toward millions.

The fear? More space = more room for the AI to make things up.

The reality? The opposite is often true.

Think of it like an open-book vs. closed-book exam. Students with access to \
materials are less likely to guess wrong than those working from memory alone.

What's been your experience working with LLMs? Have you noticed patterns in when \
they're most reliable vs. when they start making things up?

#ArtificialIntelligence #MachineLearning #AI #LLM
"""

NEUTRAL_TEXT = (
    "The library on Elm Street opens at nine every weekday morning. Volunteers sort "
    "returned books into carts before the doors open. Children gather near the front "
    "desk for story hour on Tuesdays. The reading room has twelve long tables and a "
    "row of old lamps. Most visitors stay for an hour or two. Parking can be "
    "difficult near noon, so many people walk or ride bikes. The staff plans a book "
    "sale for early spring."
)

REPETITIVE_AI_TEXT = " ".join(
    ["Moreover, it's important to note that in conclusion we delve into this."] * 8
)

MIXED_SIGNALS_TEXT = (
    "In today's digital landscape, it's important to note that artificial "
    "intelligence is fundamentally transforming the way we approach complex problems "
    "and develop innovative solutions. Furthermore, we must delve into these emerging "
    "patterns to understand their implications for future technological advancement "
    "and strategic implementation. Moreover, I'd be happy to help explain how these "
    "sophisticated systems work in this case to provide clarity and comprehensive "
    "understanding."
)

SAMPLE_TEXTS = [
    AI_TEXT,
    HUMAN_TEXT,
    GPT_TEXT,
    CLAUDE_TEXT,
    GEMINI_TEXT,
    GEMINI_STRUCTURED_TEXT,
    CLAUDE_WRITERLY_TEXT,
    NEUTRAL_TEXT,
    REPETITIVE_AI_TEXT,
    MIXED_SIGNALS_TEXT,
]


