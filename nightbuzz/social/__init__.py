"""Social mention analysis: sentiment, engagement, buzz and hourly pulse."""
