#!/usr/bin/env python3
"""
Diagnostic script: show trust score breakdowns for a search.

Usage: python diagnose.py [query]
"""
import asyncio
import sys
from engine.adapters.product_source import product_source
from engine.pipeline import search_pipeline
from engine.analysis.review_analyzer import review_analyzer


async def diagnose(query: str):
    print("=" * 60)
    print("Recensor Trust Score Diagnostic")
    print("=" * 60)

    print(f"\nSearching '{query}' ({product_source.name} source)...")
    products = await product_source.search(query)
    print(f"Total products: {len(products)}")

    print("\n" + "=" * 60)
    print("Product Analysis:")
    print("=" * 60)

    for scored in search_pipeline.annotate(products):
        product = scored.product
        breakdown = scored.breakdown

        print(f"\n🛒 Product: {product.title}")
        print(f"   Price: {product.price}")
        print(f"   Rating: {product.rating} ({product.review_count} reviews)")
        print(f"   Trust Score: {scored.trust_score}/100 - {scored.trust_label}")
        print(f"      rating:       {breakdown.rating:.1f}")
        print(f"      volume:       {breakdown.volume:.1f}")
        print(f"      authenticity: {breakdown.authenticity:.1f}")
        print(f"      sentiment:    {breakdown.sentiment:.1f}")
        for factor in breakdown.factors:
            print(f"      - {factor}")
        print(f"   Title Sentiment (placeholder): {review_analyzer.text_sentiment(product.title):.2f}")

    print("\n" + "=" * 60)
    print("Diagnostic Complete")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(diagnose(" ".join(sys.argv[1:]) or "headphones"))
