"""Candle components for prices, volume and trade flow, and timing."""