from aidoctor.providers.openai import ChatCompletionsAdapter


# same wire format as OpenAI, no penalty parameters
class PerplexityAdapter(ChatCompletionsAdapter):
    name = "perplexity"
