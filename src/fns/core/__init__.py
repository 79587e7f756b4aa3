"""Language core: IR, tokenizer, parser, evaluator and configuration."""
