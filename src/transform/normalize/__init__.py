"""Input clean-up for tickers and currencies."""
