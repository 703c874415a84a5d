"""Quick Start — keep 1-in-4 traces with the deterministic sampler."""

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

import honeycomb_sampler

# 1. Build the sampler and hand it to the tracer provider
sampler = honeycomb_sampler.create_sampler(4)
provider = TracerProvider(sampler=sampler)
provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
trace.set_tracer_provider(provider)

tracer = trace.get_tracer("quickstart")

# 2. Start some traces; roughly a quarter are printed, each tagged sample.rate=4
for i in range(8):
    with tracer.start_as_current_span("handle-request") as s:
        s.set_attribute("request.index", i)

        # Child spans share the trace id, so they get the same decision
        with tracer.start_as_current_span("query-db"):
            pass

# 3. Shutdown (flushes remaining spans)
provider.shutdown()

print(f"Done! Sampler: {sampler.get_description()} (rate={sampler.sample_rate})")
