import logging

from locust import HttpUser, events, task, between
from opentelemetry import trace

from primecloud.config import NUMBERS_SERVICE_URL, RANGE
from primecloud.load import InstanceTally


tracer = trace.get_tracer("primecloud-client")
logger = logging.getLogger(__name__)

tally = InstanceTally()


class PrimeNumbersUser(HttpUser):
    host = NUMBERS_SERVICE_URL
    wait_time = between(0.5, 2.0)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.range_from = RANGE["range_from"]
        self.range_to = RANGE["range_to"]

    @task
    def calculate_prime_numbers(self):
        with tracer.start_as_current_span("locust_task") as span:
            span.set_attribute("range.from", self.range_from)
            span.set_attribute("range.to", self.range_to)

            try:
                response = self.client.post(
                    "/primenumbers",
                    json={"from": self.range_from, "to": self.range_to},
                    name="/primenumbers",
                )
                span.set_attribute("http.status_code", response.status_code)

                if response.status_code >= 400:
                    logger.warning(
                        f"Request failed with status {response.status_code}: "
                        f"{response.text[:200]} for range [{self.range_from}, {self.range_to}]"
                    )
                    return

                instance_id = response.json().get("instanceId")
                if instance_id:
                    tally.record(instance_id)
                    span.set_attribute("instance.id", instance_id)

            except Exception as e:
                logger.error(
                    f"Exception during request for range [{self.range_from}, {self.range_to}]: "
                    f"{type(e).__name__}: {e}"
                )
                raise


@events.test_stop.add_listener
def report_instance_distribution(environment, **_kwargs):
    logger.info(f"Responses per instance: {tally.summary()}")
