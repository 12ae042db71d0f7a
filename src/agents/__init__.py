"""
Pipeline stages for Sentiment Pulse.

Contains the modules that process reviews through the pipeline:
- Tabular Loader
- Record Normalizer
- Sentiment Classifier
- Sentiment Aggregator (by app, by language)
- Summary Statistics Engine
"""
